from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Protocol

DEFAULT_DATA_DIRECTORY = Path(".data") / "HabitTracker"
DATA_DIRECTORY_ENV = "HABIT_TRACKER_DATA_DIR"
SLOT_SUFFIX = ".json"


class KeyValueStorage(Protocol):
    """Whole-value key/value slots holding serialized blobs."""

    def get(self, key: str) -> bytes | None:
        """Return the stored blob for ``key`` or ``None`` when the slot is empty."""

    def set(self, key: str, value: bytes) -> None:
        """Overwrite the slot for ``key`` with ``value``."""


def resolve_data_directory(path: str | Path | None = None, *, env: Mapping[str, str] | None = None) -> Path:
    """Resolve the directory holding the persisted slots."""

    if path is not None:
        return Path(path).expanduser()

    env_map: Mapping[str, str] = env if env is not None else os.environ
    raw_value = env_map.get(DATA_DIRECTORY_ENV)
    if raw_value:
        return Path(raw_value).expanduser()

    return DEFAULT_DATA_DIRECTORY


class FileKeyValueStorage:
    """Persist each slot as a JSON file inside a data directory."""

    def __init__(self, directory: str | Path | None = None) -> None:
        self.directory = resolve_data_directory(directory)

    def slot_path(self, key: str) -> Path:
        return self.directory / f"{key}{SLOT_SUFFIX}"

    def get(self, key: str) -> bytes | None:
        path = self.slot_path(key)
        if not path.exists():
            return None

        return path.read_bytes()

    def set(self, key: str, value: bytes) -> None:
        path = self.slot_path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_name(path.name + ".tmp")
        temp_path.write_bytes(value)
        os.replace(temp_path, path)


class InMemoryKeyValueStorage:
    """Keep slots in a dictionary for the lifetime of the process."""

    def __init__(self, initial: Mapping[str, bytes] | None = None) -> None:
        self.slots: dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        return self.slots.get(key)

    def set(self, key: str, value: bytes) -> None:
        self.slots[key] = value


__all__ = [
    "KeyValueStorage",
    "FileKeyValueStorage",
    "InMemoryKeyValueStorage",
    "resolve_data_directory",
    "DEFAULT_DATA_DIRECTORY",
    "DATA_DIRECTORY_ENV",
]
