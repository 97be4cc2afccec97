from __future__ import annotations

from datetime import datetime
from typing import Collection, Optional

import pytest

from habit_tracker.constants import REMINDER_BODY, REMINDER_IDENTIFIER, REMINDER_TITLE
from habit_tracker.notifications import (
    AuthorizationOption,
    CalendarTrigger,
    LocalNotificationCenter,
    NotificationContent,
    NotificationError,
    NotificationRequest,
    build_daily_reminder_request,
    schedule_daily_reminder,
)
from habit_tracker.notifications.center import AddCompletion, AuthorizationCompletion


def _clock(value: datetime):
    return lambda: value


def test_trigger_fires_later_same_day() -> None:
    trigger = CalendarTrigger(hour=9)

    assert trigger.next_fire_at(datetime(2024, 3, 1, 7, 30)) == datetime(2024, 3, 1, 9, 0)


def test_trigger_rolls_over_to_next_day() -> None:
    trigger = CalendarTrigger(hour=9)

    assert trigger.next_fire_at(datetime(2024, 3, 1, 9, 0)) == datetime(2024, 3, 2, 9, 0)
    assert trigger.next_fire_at(datetime(2024, 12, 31, 22, 0)) == datetime(2025, 1, 1, 9, 0)


def test_trigger_rejects_invalid_hour() -> None:
    with pytest.raises(ValueError):
        CalendarTrigger(hour=24)


def test_daily_reminder_request_is_static() -> None:
    request = build_daily_reminder_request()

    assert request.identifier == REMINDER_IDENTIFIER
    assert request.content.title == REMINDER_TITLE
    assert request.content.body == REMINDER_BODY
    assert request.trigger == CalendarTrigger(hour=9, minute=0, repeats=True)


def test_schedule_daily_reminder_when_granted() -> None:
    center = LocalNotificationCenter(clock=_clock(datetime(2024, 3, 1, 8, 0)))

    schedule_daily_reminder(center)

    assert [request.identifier for request in center.pending_requests()] == [REMINDER_IDENTIFIER]
    assert center.next_fire_at(REMINDER_IDENTIFIER) == datetime(2024, 3, 1, 9, 0)
    assert center.granted_options == {AuthorizationOption.ALERT, AuthorizationOption.SOUND, AuthorizationOption.BADGE}


def test_rescheduling_replaces_pending_request() -> None:
    center = LocalNotificationCenter(clock=_clock(datetime(2024, 3, 1, 8, 0)))

    schedule_daily_reminder(center)
    schedule_daily_reminder(center, hour=10)

    pending = center.pending_requests()
    assert len(pending) == 1
    assert pending[0].trigger.hour == 10


def test_permission_denied_is_only_logged(caplog: pytest.LogCaptureFixture) -> None:
    center = LocalNotificationCenter(authorization_granted=False)

    with caplog.at_level("INFO"):
        schedule_daily_reminder(center)

    assert center.pending_requests() == []
    assert "Notification permission not granted." in caplog.text


def test_add_error_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    class _BrokenCenter:
        def request_authorization(
            self, options: Collection[AuthorizationOption], completion: AuthorizationCompletion
        ) -> None:
            completion(True, None)

        def add(self, request: NotificationRequest, completion: Optional[AddCompletion] = None) -> None:
            assert completion is not None
            completion(NotificationError("service unavailable"))

    with caplog.at_level("ERROR"):
        schedule_daily_reminder(_BrokenCenter())

    assert "Error scheduling notification: service unavailable" in caplog.text


def test_add_without_authorization_reports_error() -> None:
    center = LocalNotificationCenter(authorization_granted=False)
    errors: list[Optional[Exception]] = []

    center.add(build_daily_reminder_request(), completion=errors.append)

    assert len(errors) == 1
    assert isinstance(errors[0], NotificationError)


def test_deliver_due_repeats_daily() -> None:
    center = LocalNotificationCenter(clock=_clock(datetime(2024, 3, 1, 8, 0)))
    schedule_daily_reminder(center)

    assert center.deliver_due(datetime(2024, 3, 1, 8, 59)) == []

    delivered = center.deliver_due(datetime(2024, 3, 1, 9, 5))
    assert [request.identifier for request in delivered] == [REMINDER_IDENTIFIER]
    assert center.deliver_due(datetime(2024, 3, 1, 12, 0)) == []
    assert center.next_fire_at(REMINDER_IDENTIFIER) == datetime(2024, 3, 2, 9, 0)
    assert len(center.deliver_due(datetime(2024, 3, 2, 9, 0))) == 1


def test_non_repeating_request_is_delivered_once() -> None:
    center = LocalNotificationCenter(clock=_clock(datetime(2024, 3, 1, 8, 0)))
    request = NotificationRequest(
        identifier="once",
        content=NotificationContent(title="Once", body="Only once"),
        trigger=CalendarTrigger(hour=9, repeats=False),
    )
    center.add(request)

    assert center.deliver_due(datetime(2024, 3, 1, 10, 0)) == [request]
    assert center.pending_requests() == []
    assert center.deliver_due(datetime(2024, 3, 2, 10, 0)) == []


def test_remove_pending_requests() -> None:
    center = LocalNotificationCenter(clock=_clock(datetime(2024, 3, 1, 8, 0)))
    schedule_daily_reminder(center)

    center.remove_pending_requests([REMINDER_IDENTIFIER, "unknown"])

    assert center.pending_requests() == []
    assert center.next_fire_at(REMINDER_IDENTIFIER) is None
