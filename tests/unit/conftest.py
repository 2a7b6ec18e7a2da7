"""Default marks for tests under `tests/unit/`.

Every test here is marked `unit`; tests in `*_props.py` modules are also
marked `property` so Hypothesis suites can be selected with `-m property`.
"""

from pathlib import Path

import pytest

UNIT_ROOT = Path(__file__).parent.resolve()
PROPERTY_SUFFIX = "_props.py"


def _ensure_marker(item: pytest.Item, name: str) -> None:
    if not any(marker.name == name for marker in item.iter_markers()):
        item.add_marker(getattr(pytest.mark, name))


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Add default `unit` (and `property`) marks to items in `tests/unit/`."""
    for item in items:
        path = item.path.resolve()
        if UNIT_ROOT in path.parents:
            _ensure_marker(item, "unit")
            if path.name.endswith(PROPERTY_SUFFIX):
                _ensure_marker(item, "property")
