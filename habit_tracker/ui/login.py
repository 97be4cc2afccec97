from __future__ import annotations

from typing import Optional

import streamlit as st

from habit_tracker.auth import REJECTED_MESSAGE, Authenticator, attempt_login
from habit_tracker.constants import (
    LOGIN_FAILED_KEY,
    LOGIN_PASSWORD_ERROR_KEY,
    LOGIN_PASSWORD_KEY,
    LOGIN_USERNAME_ERROR_KEY,
    LOGIN_USERNAME_KEY,
)
from habit_tracker.state import mark_authenticated
from habit_tracker.ui.common import field_error


def _clear_username_error() -> None:
    st.session_state[LOGIN_USERNAME_ERROR_KEY] = None


def _clear_password_error() -> None:
    st.session_state[LOGIN_PASSWORD_ERROR_KEY] = None


def submit_login(authenticator: Optional[Authenticator] = None) -> bool:
    """Run the gate on the current form values and record the outcome in session state."""

    username = str(st.session_state.get(LOGIN_USERNAME_KEY) or "")
    password = str(st.session_state.get(LOGIN_PASSWORD_KEY) or "")
    result = attempt_login(username, password, authenticator)

    if result.username_error:
        st.session_state[LOGIN_USERNAME_ERROR_KEY] = result.username_error
    if result.password_error:
        st.session_state[LOGIN_PASSWORD_ERROR_KEY] = result.password_error

    if result.authenticated:
        st.session_state[LOGIN_FAILED_KEY] = False
        mark_authenticated()
    elif result.message:
        st.session_state[LOGIN_FAILED_KEY] = True

    return result.authenticated


def render_login_view(authenticator: Optional[Authenticator] = None) -> None:
    st.subheader("Login")

    st.text_input(
        "Username",
        key=LOGIN_USERNAME_KEY,
        on_change=_clear_username_error,
        autocomplete="username",
    )
    field_error(st.session_state.get(LOGIN_USERNAME_ERROR_KEY))

    st.text_input(
        "Password",
        key=LOGIN_PASSWORD_KEY,
        type="password",
        on_change=_clear_password_error,
        autocomplete="current-password",
    )
    field_error(st.session_state.get(LOGIN_PASSWORD_ERROR_KEY))

    st.button(
        "Log In",
        use_container_width=True,
        on_click=submit_login,
        kwargs={"authenticator": authenticator},
    )

    if st.session_state.get(LOGIN_FAILED_KEY):
        st.error(REJECTED_MESSAGE)
