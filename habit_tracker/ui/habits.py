from __future__ import annotations

from datetime import datetime
from typing import Optional

import streamlit as st

from habit_tracker.constants import DELETE_SELECTION_KEY, NEW_HABIT_ERROR_KEY, NEW_HABIT_NAME_KEY
from habit_tracker.models import Habit
from habit_tracker.notifications.center import LocalNotificationCenter
from habit_tracker.state import get_habit_store, get_habits
from habit_tracker.store import HabitStore
from habit_tracker.ui.common import completion_icon, field_error, habit_label

HABIT_NAME_REQUIRED_MESSAGE = "Please enter a habit name"


def add_habit_from_input(store: HabitStore) -> Optional[Habit]:
    """Add the habit typed into the input field and clear the field.

    An empty field leaves the collection untouched and records an inline hint.
    """

    name = str(st.session_state.get(NEW_HABIT_NAME_KEY) or "")
    habit = store.add(name)
    if habit is None:
        st.session_state[NEW_HABIT_ERROR_KEY] = HABIT_NAME_REQUIRED_MESSAGE
        return None

    st.session_state[NEW_HABIT_NAME_KEY] = ""
    st.session_state[NEW_HABIT_ERROR_KEY] = None
    return habit


def _clear_habit_error() -> None:
    st.session_state[NEW_HABIT_ERROR_KEY] = None


def delete_selected_habits(store: HabitStore) -> int:
    """Delete the habits picked in the bulk-delete selector.

    The selector holds habit ids; they are resolved to positions against the
    current collection here, and ids that no longer exist are skipped.
    """

    selected_ids = set(st.session_state.get(DELETE_SELECTION_KEY) or [])
    positions = {position for position, habit in enumerate(store.habits) if habit.id in selected_ids}
    removed = store.delete(positions)
    st.session_state[DELETE_SELECTION_KEY] = []
    return len(removed)


def delete_habit(store: HabitStore, habit_id: str) -> None:
    positions = {position for position, habit in enumerate(store.habits) if habit.id == habit_id}
    store.delete(positions)


def show_due_reminders(center: LocalNotificationCenter, *, now: Optional[datetime] = None) -> int:
    delivered = center.deliver_due(now)
    for request in delivered:
        st.toast(f"**{request.content.title}**  \n{request.content.body}", icon="⏰")
    return len(delivered)


def render_habit_row(habit: Habit, store: HabitStore) -> None:
    name_column, toggle_column, delete_column = st.columns([0.7, 0.15, 0.15])
    with name_column:
        st.markdown(habit_label(habit), unsafe_allow_html=True)
    with toggle_column:
        st.button(
            completion_icon(habit),
            key=f"toggle_{habit.id}",
            on_click=store.toggle_completion,
            args=(habit.id,),
            help="Mark as done or reopen",
        )
    with delete_column:
        st.button(
            "🗑️",
            key=f"delete_{habit.id}",
            on_click=delete_habit,
            args=(store, habit.id),
            help="Delete habit",
        )


def render_habit_tracker_view(center: LocalNotificationCenter) -> None:
    store = get_habit_store()
    show_due_reminders(center)

    st.header("Habit Tracker")

    input_column, button_column = st.columns([0.85, 0.15])
    with input_column:
        st.text_input(
            "New Habit",
            key=NEW_HABIT_NAME_KEY,
            placeholder="New Habit",
            label_visibility="collapsed",
            on_change=_clear_habit_error,
        )
    with button_column:
        st.button("➕", key="add_habit", on_click=add_habit_from_input, args=(store,), use_container_width=True)
    field_error(st.session_state.get(NEW_HABIT_ERROR_KEY))

    habits = get_habits()
    if not habits:
        st.caption("No habits yet. Add your first one above.")
        return

    with st.container(border=True):
        for habit in habits:
            render_habit_row(habit, store)

    names_by_id = {habit.id: habit.name for habit in habits}
    with st.expander("Delete several habits"):
        st.multiselect(
            "Habits to delete",
            options=[habit.id for habit in habits],
            format_func=lambda habit_id: names_by_id.get(habit_id, habit_id),
            key=DELETE_SELECTION_KEY,
        )
        st.button("Delete selected", on_click=delete_selected_habits, args=(store,))
