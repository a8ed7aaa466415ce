"""
Snapshot save/restore of a CalculatorState through a key-value store.

The store is an external collaborator: anything with ``get(key)`` and
``set(key, value)`` over strings satisfies SnapshotStore. Two
implementations ship here, an in-memory dict and a single JSON file.

save_state() and load_state() never raise. A failing store is logged and
reported to the caller as a status message, and a load that fails leaves
the caller's current state untouched.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from .state import CalculatorState

logger = logging.getLogger(__name__)

STORAGE_KEY: str = "brickCalculatorParams"

SAVED_MESSAGE = "Calculation saved!"
SAVE_FAILED_MESSAGE = "Error saving calculation."
LOADED_MESSAGE = "Calculation loaded!"
LOAD_FAILED_MESSAGE = "Error loading calculation."


@runtime_checkable
class SnapshotStore(Protocol):
    """Protocol for key-value snapshot stores."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryStore:
    """Dict-backed store; contents live as long as the instance."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """
    Store backed by one JSON object file mapping keys to string values.

    A missing file reads as empty. Writes rewrite the whole file. Parse and
    I/O errors propagate to the caller.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Snapshot file {self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)


def save_state(store: SnapshotStore, state: CalculatorState) -> str:
    """Serialise *state* into *store*; return the status message to show."""
    try:
        store.set(STORAGE_KEY, json.dumps(state.to_record()))
    except Exception:
        logger.exception("Could not save calculation to %r", store)
        return SAVE_FAILED_MESSAGE
    logger.debug("Saved calculation under %s", STORAGE_KEY)
    return SAVED_MESSAGE


def load_state(store: SnapshotStore) -> tuple[CalculatorState | None, str]:
    """
    Restore the last saved state from *store*.

    Returns:
        ``(state, message)``. ``state`` is None when nothing was saved
        (message ``""``) or when the snapshot could not be read or decoded
        (message LOAD_FAILED_MESSAGE).
    """
    try:
        raw = store.get(STORAGE_KEY)
        if raw is None:
            return None, ""
        state = CalculatorState.from_record(json.loads(raw))
    except Exception:
        logger.exception("Could not load calculation from %r", store)
        return None, LOAD_FAILED_MESSAGE
    return state, LOADED_MESSAGE


def has_saved_state(store: SnapshotStore) -> bool:
    """True if *store* holds a snapshot; an unreadable store counts as empty."""
    try:
        return store.get(STORAGE_KEY) is not None
    except Exception:
        logger.exception("Could not read %r", store)
        return False
