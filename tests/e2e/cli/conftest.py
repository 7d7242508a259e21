"""Fixtures for CLI end-to-end tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    """CliRunner with CARTSOURCE environment variables cleared."""
    monkeypatch.delenv("CARTSOURCE_LOG_PATH", raising=False)
    monkeypatch.delenv("CARTSOURCE_LOGGER_LEVELS", raising=False)
    return CliRunner()


@pytest.fixture
def write_events(tmp_path: Path) -> Callable[..., Path]:
    """Write event records (or raw text) to a file and return its path."""

    def _write(records: list[dict[str, Any]] | str, name: str = "events.json") -> Path:
        path = tmp_path / name
        text = records if isinstance(records, str) else json.dumps(records)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cart_records() -> list[dict[str, Any]]:
    """A recorded stream: A added twice at 3, B once at 7, total calculated."""
    return [
        {
            "event_type": "ProductAddedToCart",
            "payload": {"cart_id": "cart-1", "product_id": "A", "price": 3},
        },
        {
            "event_type": "ProductAddedToCart",
            "payload": {"cart_id": "cart-1", "product_id": "A", "price": 3},
        },
        {
            "event_type": "ProductAddedToCart",
            "payload": {"cart_id": "cart-1", "product_id": "B", "price": 7},
        },
        {"event_type": "TotalPriceCalculated", "payload": {}},
    ]


@pytest.fixture(autouse=True)
def _reset_project_logger_level():
    """Undo `-L cartsource=...` overrides so they do not leak between tests."""
    project_logger = logging.getLogger("cartsource")
    saved = project_logger.level
    yield
    project_logger.setLevel(saved)
