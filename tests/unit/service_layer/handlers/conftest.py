"""Pytest fixtures for service layer handler unit tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from .fakes import bootstrap_test_bus

if TYPE_CHECKING:
    from cartsource.service_layer.messagebus import MessageBus


@pytest.fixture
def bus() -> MessageBus:
    """A fresh message bus per test."""
    return bootstrap_test_bus()
