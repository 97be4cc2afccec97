"""Central constants for Streamlit session state keys and defaults."""

SS_AUTHENTICATED: str = "authenticated"
SS_HABITS: str = "habits"
SS_HABIT_STORE: str = "habit_store"
SS_NOTIFICATION_CENTER: str = "notification_center"
SS_HABIT_VIEW_ACTIVATED: str = "habit_view_activated"

LOGIN_USERNAME_KEY: str = "login_username"
LOGIN_PASSWORD_KEY: str = "login_password"
LOGIN_USERNAME_ERROR_KEY: str = "login_username_error"
LOGIN_PASSWORD_ERROR_KEY: str = "login_password_error"
LOGIN_FAILED_KEY: str = "login_failed"

NEW_HABIT_NAME_KEY: str = "new_habit_name"
NEW_HABIT_ERROR_KEY: str = "new_habit_error"
DELETE_SELECTION_KEY: str = "delete_selection"

HABITS_STORAGE_KEY: str = "habits"

REMINDER_IDENTIFIER: str = "habitReminder"
REMINDER_TITLE: str = "Habit Reminder"
REMINDER_BODY: str = "Don't forget to complete your habits today!"
DEFAULT_REMINDER_HOUR: int = 9
