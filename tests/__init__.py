"""handykit test suite.

Folder taxonomy
- unit/ : Isolated, fast checks of a single module or function.
- e2e/  : The ``handykit`` command line driven through Click's CliRunner.

General guidance
- Keep unit tests deterministic: inject ``random.Random`` and clocks, patch
  ``asyncio.sleep`` instead of waiting.
- Property-based tests live next to the module they exercise and use
  @pytest.mark.property.
"""
