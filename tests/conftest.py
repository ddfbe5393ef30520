from __future__ import annotations

import sys
from pathlib import Path

import pytest

from tests.shared.scheduling import ManualScheduler, Recorder

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def recorder(scheduler: ManualScheduler) -> Recorder:
    return Recorder(scheduler)
