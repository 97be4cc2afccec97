from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Dict

import pytest
import streamlit as st

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

if TYPE_CHECKING:
    from habit_tracker.storage import InMemoryKeyValueStorage
    from habit_tracker.store import HabitStore


@pytest.fixture()
def session_state(monkeypatch: pytest.MonkeyPatch) -> Dict[str, object]:
    state: Dict[str, object] = {}
    monkeypatch.setattr(st, "session_state", state, raising=False)
    return state


@pytest.fixture()
def memory_storage() -> "InMemoryKeyValueStorage":
    from habit_tracker.storage import InMemoryKeyValueStorage

    return InMemoryKeyValueStorage()


@pytest.fixture()
def store(memory_storage: "InMemoryKeyValueStorage") -> "HabitStore":
    from habit_tracker.store import HabitStore

    return HabitStore(memory_storage)
