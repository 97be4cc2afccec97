from __future__ import annotations

import html

import streamlit as st

from habit_tracker.models import Habit


def habit_label(habit: Habit) -> str:
    """Markdown for a habit row; completed habits are struck through and greyed out."""

    name = html.escape(habit.name)
    if habit.is_completed:
        return f"<span class='habit-done'><s>{name}</s></span>"
    return f"<span class='habit-open'>{name}</span>"


def completion_icon(habit: Habit) -> str:
    return "✅" if habit.is_completed else "⚪"


def inject_styles() -> None:
    st.markdown(
        """
        <style>
            :root {
                --habit-primary: #1f6feb;
                --habit-muted: #8b949e;
                --habit-error: #d1242f;
            }

            .block-container {
                padding-top: 1.2rem;
                max-width: 720px;
            }

            .habit-done {
                color: var(--habit-muted);
            }

            .habit-open {
                font-weight: 600;
            }

            .field-error {
                color: var(--habit-error);
                font-size: 0.9rem;
                margin-top: -0.5rem;
                margin-bottom: 0.5rem;
            }

            .stButton > button {
                background: var(--habit-primary);
                color: #ffffff;
                border: none;
                font-weight: 600;
            }
        </style>
    """,
        unsafe_allow_html=True,
    )


def field_error(message: str | None) -> None:
    if message:
        st.markdown(f"<div class='field-error'>{html.escape(message)}</div>", unsafe_allow_html=True)
