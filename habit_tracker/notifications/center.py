from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Callable, Collection, Iterable, Optional, Protocol

LOGGER = logging.getLogger(__name__)

AuthorizationCompletion = Callable[[bool, Optional[Exception]], None]
AddCompletion = Callable[[Optional[Exception]], None]


class NotificationError(RuntimeError):
    """Raised when a notification request cannot be scheduled."""


class AuthorizationOption(str, Enum):
    ALERT = "alert"
    SOUND = "sound"
    BADGE = "badge"


@dataclass(frozen=True)
class CalendarTrigger:
    """Fire whenever the local wall clock matches ``hour:minute``."""

    hour: int
    minute: int = 0
    repeats: bool = True

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour must be within 0..23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute must be within 0..59, got {self.minute}")

    def next_fire_at(self, after: datetime) -> datetime:
        """Return the first matching wall-clock time strictly after ``after``."""

        candidate = after.replace(hour=self.hour, minute=self.minute, second=0, microsecond=0)
        if candidate <= after:
            candidate += timedelta(days=1)
        return candidate


@dataclass(frozen=True)
class NotificationContent:
    title: str
    body: str
    sound: bool = True


@dataclass(frozen=True)
class NotificationRequest:
    identifier: str
    content: NotificationContent
    trigger: CalendarTrigger


class NotificationCenter(Protocol):
    """Fire-and-forget scheduling surface for user notifications."""

    def request_authorization(
        self, options: Collection[AuthorizationOption], completion: AuthorizationCompletion
    ) -> None:
        """Ask for permission and report the outcome through ``completion``."""

    def add(self, request: NotificationRequest, completion: Optional[AddCompletion] = None) -> None:
        """Schedule ``request``, replacing any pending request with the same identifier."""


class LocalNotificationCenter:
    """Keep pending notification requests in process and hand out the due ones.

    ``deliver_due`` is polled by the presentation layer; repeating triggers are
    advanced to their next fire time once delivered.
    """

    def __init__(
        self,
        *,
        authorization_granted: bool = True,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.authorization_granted = authorization_granted
        self.granted_options: frozenset[AuthorizationOption] = frozenset()
        self._clock = clock or datetime.now
        self._pending: dict[str, NotificationRequest] = {}
        self._next_fire: dict[str, datetime] = {}

    def request_authorization(
        self, options: Collection[AuthorizationOption], completion: AuthorizationCompletion
    ) -> None:
        if self.authorization_granted:
            self.granted_options = frozenset(options)
        completion(self.authorization_granted, None)

    def add(self, request: NotificationRequest, completion: Optional[AddCompletion] = None) -> None:
        error: Optional[Exception] = None
        if not self.authorization_granted:
            error = NotificationError(f"Notifications are not authorized, dropping '{request.identifier}'")
        else:
            self._pending[request.identifier] = request
            self._next_fire[request.identifier] = request.trigger.next_fire_at(self._clock())
            LOGGER.debug(
                "Scheduled notification '%s' for %s", request.identifier, self._next_fire[request.identifier]
            )

        if completion is not None:
            completion(error)

    def pending_requests(self) -> list[NotificationRequest]:
        return list(self._pending.values())

    def next_fire_at(self, identifier: str) -> Optional[datetime]:
        return self._next_fire.get(identifier)

    def remove_pending_requests(self, identifiers: Iterable[str]) -> None:
        for identifier in identifiers:
            self._pending.pop(identifier, None)
            self._next_fire.pop(identifier, None)

    def deliver_due(self, now: Optional[datetime] = None) -> list[NotificationRequest]:
        """Return requests whose fire time has passed, once per occurrence."""

        now_ts = now or self._clock()
        delivered: list[NotificationRequest] = []
        for identifier, request in list(self._pending.items()):
            fire_at = self._next_fire[identifier]
            if fire_at > now_ts:
                continue

            delivered.append(request)
            if request.trigger.repeats:
                self._next_fire[identifier] = request.trigger.next_fire_at(now_ts)
            else:
                self.remove_pending_requests([identifier])

        return delivered


__all__ = [
    "AuthorizationOption",
    "CalendarTrigger",
    "LocalNotificationCenter",
    "NotificationCenter",
    "NotificationContent",
    "NotificationError",
    "NotificationRequest",
]
