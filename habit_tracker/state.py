from __future__ import annotations

import logging
from typing import Any, Iterable, List, Sequence

import streamlit as st

from habit_tracker.config import HabitTrackerConfig
from habit_tracker.constants import (
    SS_AUTHENTICATED,
    SS_HABIT_STORE,
    SS_HABIT_VIEW_ACTIVATED,
    SS_HABITS,
    SS_NOTIFICATION_CENTER,
)
from habit_tracker.models import Habit
from habit_tracker.notifications.center import LocalNotificationCenter
from habit_tracker.notifications.reminders import schedule_daily_reminder
from habit_tracker.storage import FileKeyValueStorage, KeyValueStorage
from habit_tracker.store import HabitStore

LOGGER = logging.getLogger(__name__)

__all__ = [
    "init_state",
    "is_authenticated",
    "mark_authenticated",
    "get_habit_store",
    "get_notification_center",
    "get_habits",
    "activate_habit_view",
]


def init_state() -> None:
    """Initialize all required session state keys if they are missing."""

    st.session_state.setdefault(SS_AUTHENTICATED, False)
    st.session_state.setdefault(SS_HABITS, [])
    st.session_state.setdefault(SS_HABIT_VIEW_ACTIVATED, False)


def is_authenticated() -> bool:
    return bool(st.session_state.get(SS_AUTHENTICATED, False))


def mark_authenticated() -> None:
    st.session_state[SS_AUTHENTICATED] = True


def _mirror_habits(habits: Sequence[Habit]) -> None:
    st.session_state[SS_HABITS] = [habit.model_dump() for habit in habits]


def get_habit_store(storage: KeyValueStorage | None = None, *, config: HabitTrackerConfig | None = None) -> HabitStore:
    """Return the session's habit store, creating it on first use.

    The store's change notifications keep ``SS_HABITS`` in sync, which is what the
    habit screen renders from.
    """

    store = st.session_state.get(SS_HABIT_STORE)
    if isinstance(store, HabitStore):
        return store

    if storage is None:
        settings = config or HabitTrackerConfig.from_env()
        storage = FileKeyValueStorage(settings.data_directory)

    store = HabitStore(storage)
    store.subscribe(_mirror_habits)
    st.session_state[SS_HABIT_STORE] = store
    return store


def get_notification_center() -> LocalNotificationCenter:
    center = st.session_state.get(SS_NOTIFICATION_CENTER)
    if isinstance(center, LocalNotificationCenter):
        return center

    center = LocalNotificationCenter()
    st.session_state[SS_NOTIFICATION_CENTER] = center
    return center


def get_habits() -> List[Habit]:
    """Return habits from session state as Habit models."""

    raw_habits: Iterable[Any] = st.session_state.get(SS_HABITS, [])
    return [raw if isinstance(raw, Habit) else Habit.model_validate(raw) for raw in raw_habits]


def activate_habit_view(*, config: HabitTrackerConfig | None = None) -> bool:
    """Load persisted habits and schedule the reminder once per session.

    Returns True when this call performed the activation.
    """

    if st.session_state.get(SS_HABIT_VIEW_ACTIVATED, False):
        return False

    settings = config or HabitTrackerConfig.from_env()
    store = get_habit_store(config=settings)
    store.load()

    if settings.notifications_enabled:
        schedule_daily_reminder(get_notification_center(), hour=settings.reminder_hour)
    else:
        LOGGER.info("Daily reminder disabled by configuration")

    st.session_state[SS_HABIT_VIEW_ACTIVATED] = True
    return True
