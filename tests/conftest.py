"""Global pytest configuration for CARTSOURCE."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

pytest_plugins = [
    "tests.fixtures.carts",
    "tests.fixtures.envelopes",
]

TESTS_ROOT = Path(__file__).parent.resolve()

# top-level test directory -> marker applied to everything collected under it
LAYER_MARKERS = ("unit", "integration", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark each test with the layer it lives in, unless already marked."""
    for item in items:
        try:
            layer = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if layer in LAYER_MARKERS and item.get_closest_marker(layer) is None:
            item.add_marker(getattr(pytest.mark, layer))
