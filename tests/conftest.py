"""
This file configures pytest.

It puts src/ on the import path so the tests run from a plain checkout, and
provides the saved AWS events under tests/events/.

uv sync --extra test
uv run pytest -q tests
"""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
EVENTS_ROOT = Path(__file__).resolve().parent / "events"

if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


@pytest.fixture(autouse=True)
def _clean_parser_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PARSER_NUMBER_MODE", "PARSER_LOG_EVENTS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def load_event() -> Callable[[str], dict[str, Any]]:
    def _load(name: str) -> dict[str, Any]:
        return json.loads((EVENTS_ROOT / f"{name}.json").read_text(encoding="utf-8"))

    return _load
