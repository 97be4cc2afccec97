from __future__ import annotations

from datetime import datetime
from pathlib import Path

from habit_tracker.config import HabitTrackerConfig
from habit_tracker.constants import (
    HABITS_STORAGE_KEY,
    REMINDER_IDENTIFIER,
    SS_AUTHENTICATED,
    SS_HABIT_VIEW_ACTIVATED,
    SS_HABITS,
)
from habit_tracker.state import (
    activate_habit_view,
    get_habit_store,
    get_habits,
    get_notification_center,
    init_state,
    is_authenticated,
    mark_authenticated,
)
from habit_tracker.storage import InMemoryKeyValueStorage


def test_init_state_sets_defaults(session_state: dict[str, object]) -> None:
    init_state()

    assert session_state[SS_AUTHENTICATED] is False
    assert session_state[SS_HABITS] == []
    assert session_state[SS_HABIT_VIEW_ACTIVATED] is False
    assert not is_authenticated()


def test_mark_authenticated(session_state: dict[str, object]) -> None:
    init_state()
    mark_authenticated()

    assert is_authenticated()


def test_store_is_reused_within_session(session_state: dict[str, object]) -> None:
    storage = InMemoryKeyValueStorage()

    first = get_habit_store(storage)
    second = get_habit_store(InMemoryKeyValueStorage())

    assert first is second
    assert first.storage is storage


def test_store_changes_are_mirrored_into_session(session_state: dict[str, object]) -> None:
    store = get_habit_store(InMemoryKeyValueStorage())

    store.add("Read")
    store.toggle_completion(store.habits[0].id)

    habits = get_habits()
    assert [(habit.name, habit.is_completed) for habit in habits] == [("Read", True)]
    assert habits == store.habits


def test_activation_loads_and_schedules_once(session_state: dict[str, object], tmp_path: Path) -> None:
    storage = InMemoryKeyValueStorage({HABITS_STORAGE_KEY: b'[{"id": "1", "name": "Read", "isCompleted": false}]'})
    get_habit_store(storage)
    config = HabitTrackerConfig(data_directory=tmp_path)

    assert activate_habit_view(config=config) is True
    assert [habit.name for habit in get_habits()] == ["Read"]
    assert [request.identifier for request in get_notification_center().pending_requests()] == [REMINDER_IDENTIFIER]

    storage.set(HABITS_STORAGE_KEY, b"[]")
    assert activate_habit_view(config=config) is False
    assert [habit.name for habit in get_habits()] == ["Read"]


def test_activation_respects_disabled_notifications(session_state: dict[str, object], tmp_path: Path) -> None:
    get_habit_store(InMemoryKeyValueStorage())

    activate_habit_view(config=HabitTrackerConfig(data_directory=tmp_path, notifications_enabled=False))

    assert get_notification_center().pending_requests() == []


def test_activation_uses_configured_hour(session_state: dict[str, object], tmp_path: Path) -> None:
    get_habit_store(InMemoryKeyValueStorage())

    activate_habit_view(config=HabitTrackerConfig(data_directory=tmp_path, reminder_hour=18))

    center = get_notification_center()
    fire_at = center.next_fire_at(REMINDER_IDENTIFIER)
    assert fire_at is not None
    assert fire_at.hour == 18
    assert fire_at > datetime.now()
