from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Sequence

from habit_tracker.constants import HABITS_STORAGE_KEY
from habit_tracker.models import Habit, decode_habits, encode_habits
from habit_tracker.storage import KeyValueStorage

LOGGER = logging.getLogger(__name__)

HabitsListener = Callable[[Sequence[Habit]], None]


class HabitStore:
    """Own the ordered habit collection and mirror it to one persisted slot.

    Every effective mutation rewrites the whole collection under ``key`` and then
    notifies subscribers with the new ordered list. Persistence problems never
    reach the caller: loading falls back to an empty collection and failed saves
    leave the in-memory list as the source of truth.
    """

    def __init__(self, storage: KeyValueStorage, *, key: str = HABITS_STORAGE_KEY) -> None:
        self.storage = storage
        self.key = key
        self._habits: List[Habit] = []
        self._listeners: List[HabitsListener] = []

    @property
    def habits(self) -> list[Habit]:
        return list(self._habits)

    def __len__(self) -> int:
        return len(self._habits)

    def find(self, habit_id: str) -> Optional[Habit]:
        for habit in self._habits:
            if habit.id == habit_id:
                return habit
        return None

    def subscribe(self, listener: HabitsListener) -> Callable[[], None]:
        """Register ``listener`` for collection changes and return an unsubscribe callable."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def load(self) -> list[Habit]:
        """Replace the in-memory collection with the persisted one."""

        self._habits = self._read_persisted()
        self._emit()
        return self.habits

    def add(self, name: str) -> Optional[Habit]:
        if not name:
            return None

        habit = Habit(name=name)
        self._habits.append(habit)
        self._commit()
        return habit

    def toggle_completion(self, habit_id: str) -> Optional[Habit]:
        for index, habit in enumerate(self._habits):
            if habit.id != habit_id:
                continue

            updated = habit.model_copy(update={"is_completed": not habit.is_completed})
            self._habits[index] = updated
            self._commit()
            return updated

        return None

    def delete(self, indices: Iterable[int]) -> list[Habit]:
        """Remove the habits at the given positions of the current ordering.

        Positions outside the collection are ignored. Returns the removed habits.
        """

        positions = {index for index in indices if 0 <= index < len(self._habits)}
        if not positions:
            return []

        removed = [habit for index, habit in enumerate(self._habits) if index in positions]
        self._habits = [habit for index, habit in enumerate(self._habits) if index not in positions]
        self._commit()
        return removed

    def _read_persisted(self) -> list[Habit]:
        try:
            blob = self.storage.get(self.key)
            if blob is None:
                return []
            return decode_habits(blob)
        except Exception as exc:
            LOGGER.warning("Failed to load persisted habits: %s", exc)
            return []

    def _commit(self) -> None:
        self._persist()
        self._emit()

    def _persist(self) -> None:
        try:
            self.storage.set(self.key, encode_habits(self._habits))
        except Exception as exc:
            LOGGER.warning("Failed to persist habits: %s", exc)

    def _emit(self) -> None:
        snapshot = self.habits
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                LOGGER.exception("Habit listener %r failed", listener)


__all__ = ["HabitStore", "HabitsListener"]
