from __future__ import annotations

import sys
from pathlib import Path

import pytest

_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from linear_explorer.controller import InteractionController  # noqa: E402
from linear_explorer.event_log import EventLog  # noqa: E402


@pytest.fixture
def controller() -> InteractionController:
    return InteractionController.start(event_log=EventLog(session_id="test"))
