from .registry import CatalogRegistry, get_registry
from .types import CUSTOM_PRESET, CalculatorDefaults, ConnectionInfo, UnitPreset

__all__ = [
    "CUSTOM_PRESET",
    # Entry types (frozen, loaded from YAML)
    "UnitPreset",
    "ConnectionInfo",
    "CalculatorDefaults",
    # Registry
    "CatalogRegistry",
    "get_registry",
]
