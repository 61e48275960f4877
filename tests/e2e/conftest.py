"""Default marks for tests under `tests/e2e/`."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

E2E_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark every item collected below `tests/e2e/` as `e2e` unless already marked."""
    for item in items:
        if E2E_ROOT in item.path.resolve().parents and item.get_closest_marker("e2e") is None:
            item.add_marker(pytest.mark.e2e)
