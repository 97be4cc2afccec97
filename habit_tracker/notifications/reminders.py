from __future__ import annotations

import logging
from typing import Optional

from habit_tracker.constants import DEFAULT_REMINDER_HOUR, REMINDER_BODY, REMINDER_IDENTIFIER, REMINDER_TITLE
from habit_tracker.notifications.center import (
    AuthorizationOption,
    CalendarTrigger,
    NotificationCenter,
    NotificationContent,
    NotificationRequest,
)

LOGGER = logging.getLogger(__name__)

REMINDER_AUTHORIZATION_OPTIONS: tuple[AuthorizationOption, ...] = (
    AuthorizationOption.ALERT,
    AuthorizationOption.SOUND,
    AuthorizationOption.BADGE,
)


def build_daily_reminder_request(hour: int = DEFAULT_REMINDER_HOUR) -> NotificationRequest:
    """Return the static daily reminder, keyed so rescheduling replaces it."""

    return NotificationRequest(
        identifier=REMINDER_IDENTIFIER,
        content=NotificationContent(title=REMINDER_TITLE, body=REMINDER_BODY, sound=True),
        trigger=CalendarTrigger(hour=hour, minute=0, repeats=True),
    )


def _log_add_result(error: Optional[Exception]) -> None:
    if error is not None:
        LOGGER.error("Error scheduling notification: %s", error)
        return

    LOGGER.info("Daily habit reminder scheduled")


def schedule_daily_reminder(center: NotificationCenter, *, hour: int = DEFAULT_REMINDER_HOUR) -> None:
    """Request permission and, if granted, schedule the daily reminder.

    Outcomes are only logged; nothing here feeds back into application state.
    """

    request = build_daily_reminder_request(hour)

    def _on_authorization(granted: bool, error: Optional[Exception]) -> None:
        if error is not None:
            LOGGER.warning("Notification authorization failed: %s", error)
        if not granted:
            LOGGER.info("Notification permission not granted.")
            return

        center.add(request, completion=_log_add_result)

    center.request_authorization(REMINDER_AUTHORIZATION_OPTIONS, _on_authorization)
