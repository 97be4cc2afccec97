from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from habit_tracker.constants import DEFAULT_REMINDER_HOUR
from habit_tracker.storage import resolve_data_directory

LOGGER = logging.getLogger(__name__)

_FALSY_VALUES = {"0", "false", "no", "off"}


def _parse_reminder_hour(raw_value: Optional[str]) -> int:
    if raw_value is None or not raw_value.strip():
        return DEFAULT_REMINDER_HOUR

    try:
        hour = int(raw_value)
    except ValueError:
        LOGGER.warning("Invalid HABIT_TRACKER_REMINDER_HOUR %r, using %s", raw_value, DEFAULT_REMINDER_HOUR)
        return DEFAULT_REMINDER_HOUR

    return min(23, max(0, hour))


@dataclass
class HabitTrackerConfig:
    data_directory: Path
    reminder_hour: int = DEFAULT_REMINDER_HOUR
    notifications_enabled: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> HabitTrackerConfig:
        env_map = env if env is not None else os.environ
        notifications_flag = env_map.get("HABIT_TRACKER_NOTIFICATIONS", "1").strip().lower()

        return cls(
            data_directory=resolve_data_directory(env=env_map),
            reminder_hour=_parse_reminder_hour(env_map.get("HABIT_TRACKER_REMINDER_HOUR")),
            notifications_enabled=notifications_flag not in _FALSY_VALUES,
            log_level=env_map.get("HABIT_TRACKER_LOG_LEVEL", "INFO").upper(),
        )
