"""Global pytest fixtures for SLASHKIT."""

import pytest

from slashkit import config


@pytest.fixture
def no_default_base(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure no default base leaks in from the developer's environment."""
    monkeypatch.delenv(config.BASE_URL_ENV, raising=False)
