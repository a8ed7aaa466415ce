from .state import (
    CalculationResult,
    CalculatorMode,
    CalculatorState,
    format_dimension,
    format_number,
    parse_number,
    recompute,
)
from .store import (
    STORAGE_KEY,
    InMemoryStore,
    JsonFileStore,
    SnapshotStore,
    has_saved_state,
    load_state,
    save_state,
)

__all__ = [
    # state
    "CalculationResult",
    "CalculatorMode",
    "CalculatorState",
    "recompute",
    "format_dimension",
    "format_number",
    "parse_number",
    # snapshot store
    "STORAGE_KEY",
    "SnapshotStore",
    "InMemoryStore",
    "JsonFileStore",
    "save_state",
    "load_state",
    "has_saved_state",
]
