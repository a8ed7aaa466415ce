"""
Entry types for the catalog lookup tables.

All entries are loaded from YAML at startup and are frozen afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

from coursecalc.utilities.types import Axis, ConnectionType, LengthUnit

# Selecting this name unlocks free-form unit sizes; it never appears in the table.
CUSTOM_PRESET: str = "Custom"


@dataclass(frozen=True)
class UnitPreset:
    name: str
    length_mm: float
    height_mm: float

    def size_for(self, axis: Axis) -> float:
        """Unit size along *axis*."""
        return self.length_mm if axis is Axis.LENGTH else self.height_mm


@dataclass(frozen=True)
class ConnectionInfo:
    id: ConnectionType
    axis: Axis
    label: str
    description: str


@dataclass(frozen=True)
class CalculatorDefaults:
    mortar_joint_mm: float
    target_dimension: float
    target_unit: LengthUnit
    unit_count: float
    output_unit: LengthUnit
