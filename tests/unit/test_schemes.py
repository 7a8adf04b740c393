"""Unit tests for slashkit.schemes."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from slashkit.domain.value_objects import UriScheme
from slashkit.schemes import SCHEME_PREFIXES, get_uri_scheme


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("C:/Users/me/path/to/file.txt", UriScheme.LOCAL),
        ("~/path/to/file.txt", UriScheme.LOCAL),
        ("/usr/me/path/to/file.txt", UriScheme.LOCAL),
        ("./path/to/file.txt", UriScheme.RELATIVE),
        ("../path/to/file.txt", UriScheme.RELATIVE),
        ("file:///c://users/me/path/to/file.txt", UriScheme.FILE),
        ("file:///usr/me/path/to/file.txt", UriScheme.FILE),
        ("jsr:@user/path/to/file", UriScheme.JSR),
        ("jsr:/@user/path/to/file", UriScheme.JSR),
        ("npm:lib/path/to/file", UriScheme.NPM),
        ("npm:/lib/path/to/file", UriScheme.NPM),
        ("npm:/@scope/lib/path/to/file", UriScheme.NPM),
        ("data:text/plain;charset=utf-8;base64,aGVsbG8=", UriScheme.DATA),
        ("http://google.com/style.css", UriScheme.HTTP),
        ("https://google.com/style.css", UriScheme.HTTPS),
    ],
)
def test_get_uri_scheme(path, expected):
    """Each documented example maps to its scheme."""
    assert get_uri_scheme(path) is expected


@pytest.mark.parametrize("path", ["", None])
def test_empty_input_is_undefined(path):
    """Empty or None input has no scheme."""
    assert get_uri_scheme(path) is UriScheme.UNDEFINED


@pytest.mark.parametrize("path", [".hidden", "..", ".", "mailto:me@example.com", "HTTP://X"])
def test_unmatched_prefixes_are_local(path):
    """Near misses (no slash after dots, unknown or upper-case schemes) are local."""
    assert get_uri_scheme(path) is UriScheme.LOCAL


@pytest.mark.property
@settings(max_examples=200, deadline=None)
@given(path=st.text())
def test_get_uri_scheme_is_total(path):
    """Every string maps to exactly one enumerated scheme, consistent with the prefix table."""
    scheme = get_uri_scheme(path)
    assert isinstance(scheme, UriScheme)
    if not path:
        assert scheme is UriScheme.UNDEFINED
        return
    matching = [s for prefix, s in SCHEME_PREFIXES if path.startswith(prefix)]
    assert scheme is (matching[0] if matching else UriScheme.LOCAL)


@pytest.mark.property
@settings(max_examples=100, deadline=None)
@given(prefix_and_scheme=st.sampled_from(SCHEME_PREFIXES), rest=st.text())
def test_prefix_decides_scheme(prefix_and_scheme, rest):
    """Whatever follows a known prefix, the prefix decides the scheme."""
    prefix, scheme = prefix_and_scheme
    assert get_uri_scheme(prefix + rest) is scheme
