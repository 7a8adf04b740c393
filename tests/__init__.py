"""SLASHKIT test suite.

Folder taxonomy
- unit/ : Isolated, fast checks of a single module or function.
- e2e/  : The ``slashkit`` command invoked through Click's CliRunner.

General guidance
- Library functions are pure; unit tests need no fakes or fixtures beyond
  plain inputs and expected outputs.
- Property-based tests live next to the unit tests of the module they
  exercise and use @pytest.mark.property.
- Markers: unit, e2e, property
"""
