from __future__ import annotations

import logging
import sys
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, List

import pytest

# Ensure repo root on path
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class SteppingClock:
    """Deterministic clock for backup timestamps."""

    def __init__(self, start: datetime) -> None:
        self.now = start
        self.calls: List[datetime] = []

    def __call__(self) -> datetime:
        self.calls.append(self.now)
        return self.now

    def advance(self, seconds: float = 1.0) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock(datetime(2024, 5, 17, 14, 3, 9))


@pytest.fixture
def write_ini(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(text: str, name: str = "GameUserSettings.ini") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _reset_logging():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    from ini_editor.logging_config import get_logger

    for handler in root.handlers[:]:
        if handler not in before and not type(handler).__module__.startswith("_pytest"):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    get_logger.cache_clear()
