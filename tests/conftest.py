"""Global pytest configuration for AEROCODE.

Tests are marked ``unit``, ``integration`` or ``e2e`` after the directory they
live in, so ``pytest -m unit`` runs the fast suite without per-file marks.
"""

from pathlib import Path

import pytest

pytest_plugins = [
    "tests.fixtures.datagen",
]

TESTS_ROOT = Path(__file__).parent.resolve()
LAYER_MARKS = ("unit", "integration", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Mark each test with the layer directory it was collected from."""
    for item in items:
        try:
            layer = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if layer in LAYER_MARKS and item.get_closest_marker(layer) is None:
            item.add_marker(getattr(pytest.mark, layer))
