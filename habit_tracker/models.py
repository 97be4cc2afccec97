from __future__ import annotations

from typing import Iterable, List
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Habit(BaseModel):
    """A user-defined task tracked with a name and a completion flag."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    is_completed: bool = Field(default=False, alias="isCompleted")


_HABIT_LIST_ADAPTER: TypeAdapter[List[Habit]] = TypeAdapter(List[Habit])


def encode_habits(habits: Iterable[Habit]) -> bytes:
    """Serialize the full habit sequence to the persisted JSON array format."""

    return _HABIT_LIST_ADAPTER.dump_json(list(habits), by_alias=True)


def decode_habits(blob: bytes | str) -> list[Habit]:
    """Parse a persisted blob back into habits.

    Raises ``pydantic.ValidationError`` for anything that is not a JSON array of
    habit records.
    """

    return _HABIT_LIST_ADAPTER.validate_json(blob)
