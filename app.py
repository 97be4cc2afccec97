from __future__ import annotations

import logging

import streamlit as st

from habit_tracker.auth import Authenticator, FixedCredentialAuthenticator
from habit_tracker.config import HabitTrackerConfig
from habit_tracker.state import (
    activate_habit_view,
    get_notification_center,
    init_state,
    is_authenticated,
)
from habit_tracker.ui.common import inject_styles
from habit_tracker.ui.habits import render_habit_tracker_view
from habit_tracker.ui.login import render_login_view

LOGGER = logging.getLogger(__name__)


def _configure_logging(config: HabitTrackerConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(authenticator: Authenticator | None = None) -> None:
    st.set_page_config(
        page_title="Habit Tracker",
        page_icon="✅",
        layout="centered",
    )
    config = HabitTrackerConfig.from_env()
    _configure_logging(config)
    inject_styles()
    init_state()

    if not is_authenticated():
        render_login_view(authenticator or FixedCredentialAuthenticator())
        return

    if activate_habit_view(config=config):
        LOGGER.info("Habit view activated, data directory: %s", config.data_directory)
    render_habit_tracker_view(get_notification_center())


if __name__ == "__main__":
    main()
