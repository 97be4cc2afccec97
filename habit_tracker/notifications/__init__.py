from habit_tracker.notifications.center import (
    AuthorizationOption,
    CalendarTrigger,
    LocalNotificationCenter,
    NotificationCenter,
    NotificationContent,
    NotificationError,
    NotificationRequest,
)
from habit_tracker.notifications.reminders import build_daily_reminder_request, schedule_daily_reminder

__all__ = [
    "AuthorizationOption",
    "CalendarTrigger",
    "LocalNotificationCenter",
    "NotificationCenter",
    "NotificationContent",
    "NotificationError",
    "NotificationRequest",
    "build_daily_reminder_request",
    "schedule_daily_reminder",
]
