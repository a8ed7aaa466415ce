"""
Calculator session state and on-demand recompute.

CalculatorState is the complete parameter set a user edits: the axis, the
calculation mode, the unit sizes, the joint, the connection type and the
inputs of both modes. Numeric fields are kept as the text the user typed, so
a state can hold an unfinished or invalid entry; recompute() parses them and
reports bad values through the solvers' error outcomes.

States are immutable. Each transition returns a new state, and nothing is
recalculated until recompute() is called.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Union

from coursecalc.catalog.registry import CatalogRegistry, get_registry
from coursecalc.catalog.types import CUSTOM_PRESET
from coursecalc.solver.composer import solve_inverse
from coursecalc.solver.courses import solve_forward
from coursecalc.solver.errors import Outcome
from coursecalc.utilities.conversion import convert_unit, from_mm
from coursecalc.utilities.types import (
    Axis,
    ConnectionType,
    ForwardRequest,
    ForwardResult,
    HeightConnection,
    InverseRequest,
    InverseResult,
    LengthConnection,
    LengthUnit,
    UnitSpec,
    default_connection,
    parse_connection,
)

CalculationResult = Union[ForwardResult, InverseResult]


class CalculatorMode(str, Enum):
    """
    Which way the calculator runs.

    DIMENSION: target dimension in, unit count and adjusted dimension out
    UNITS:     unit count in, total dimension out
    """

    DIMENSION = "dimension"
    UNITS = "units"


def parse_number(text: str) -> float:
    """Parse a typed value; anything unparseable becomes NaN."""
    try:
        return float(text.strip())
    except (AttributeError, ValueError):
        return math.nan


def format_number(value: float) -> str:
    """Render a number the way it is shown in an input field."""
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True)
class CalculatorState:
    """Full parameter set of one calculator session."""

    axis: Axis
    mode: CalculatorMode
    selected_preset: str
    unit_length: str
    unit_height: str
    mortar_joint: str
    connection: ConnectionType
    target_dimension: str
    input_unit: LengthUnit
    unit_count: str
    output_unit: LengthUnit

    def __post_init__(self) -> None:
        if self.connection.axis is not self.axis:
            raise ValueError(
                f"connection {self.connection.value!r} belongs to the "
                f"{self.connection.axis.value} axis, not {self.axis.value}"
            )

    @classmethod
    def initial(cls, registry: CatalogRegistry | None = None) -> CalculatorState:
        """Fresh state seeded from the catalog defaults and its first preset."""
        registry = registry or get_registry()
        preset = registry.first_preset()
        defaults = registry.defaults
        return cls(
            axis=Axis.LENGTH,
            mode=CalculatorMode.DIMENSION,
            selected_preset=preset.name,
            unit_length=format_number(preset.length_mm),
            unit_height=format_number(preset.height_mm),
            mortar_joint=format_number(defaults.mortar_joint_mm),
            connection=default_connection(Axis.LENGTH),
            target_dimension=format_number(defaults.target_dimension),
            input_unit=defaults.target_unit,
            unit_count=format_number(defaults.unit_count),
            output_unit=defaults.output_unit,
        )

    # ── Transitions ────────────────────────────────────────────────────────────

    def with_axis(self, axis: Axis) -> CalculatorState:
        """Switch axis; the connection resets to the new axis' default."""
        return replace(self, axis=axis, connection=default_connection(axis))

    def with_connection(self, connection: ConnectionType | str) -> CalculatorState:
        if not isinstance(connection, (LengthConnection, HeightConnection)):
            connection = parse_connection(self.axis, connection)
        return replace(self, connection=connection)

    def with_mode(self, mode: CalculatorMode) -> CalculatorState:
        return replace(self, mode=mode)

    def with_preset(
        self, name: str, registry: CatalogRegistry | None = None
    ) -> CalculatorState:
        """
        Select a preset by name and copy its sizes into the state.

        Selecting CUSTOM_PRESET keeps the current sizes so they can be edited.

        Raises:
            KeyError: If *name* is neither a catalog preset nor CUSTOM_PRESET.
        """
        if name == CUSTOM_PRESET:
            return replace(self, selected_preset=name)
        preset = (registry or get_registry()).get_preset(name)
        return replace(
            self,
            selected_preset=preset.name,
            unit_length=format_number(preset.length_mm),
            unit_height=format_number(preset.height_mm),
        )

    def with_input_unit(self, unit: LengthUnit) -> CalculatorState:
        """
        Change the unit of the target dimension.

        A parseable target is converted so it still describes the same
        length; an unparseable one is left as typed.
        """
        current = parse_number(self.target_dimension)
        if math.isnan(current):
            return replace(self, input_unit=unit)
        converted = convert_unit(current, self.input_unit, unit)
        return replace(self, input_unit=unit, target_dimension=format_number(converted))

    # ── Derived values ─────────────────────────────────────────────────────────

    @property
    def unit_spec(self) -> UnitSpec:
        """Unit size for the current axis plus the joint, parsed."""
        size_text = self.unit_length if self.axis is Axis.LENGTH else self.unit_height
        return UnitSpec(
            unit_size=parse_number(size_text),
            mortar_joint=parse_number(self.mortar_joint),
        )

    def forward_request(self) -> ForwardRequest:
        return ForwardRequest(
            target_dimension=parse_number(self.target_dimension),
            connection=self.connection,
            unit_spec=self.unit_spec,
            unit=self.input_unit,
        )

    def inverse_request(self) -> InverseRequest:
        return InverseRequest(
            unit_count=parse_number(self.unit_count),
            connection=self.connection,
            unit_spec=self.unit_spec,
        )

    # ── Snapshot record ────────────────────────────────────────────────────────

    def to_record(self) -> dict[str, str]:
        """Flat record of every field, keyed as in saved snapshots."""
        return {
            "calculationAxis": self.axis.value,
            "mode": self.mode.value,
            "selectedBrickType": self.selected_preset,
            "brickLength": self.unit_length,
            "brickHeight": self.unit_height,
            "mortarJoint": self.mortar_joint,
            "connectionType": self.connection.value,
            "targetDimension": self.target_dimension,
            "inputUnit": self.input_unit.value,
            "numberOfUnits": self.unit_count,
            "outputUnit": self.output_unit.value,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> CalculatorState:
        """
        Rebuild a state from to_record() output.

        Raises:
            KeyError: If a field is missing.
            ValueError: If an enum field holds an unknown value.
        """
        axis = Axis(record["calculationAxis"])
        return cls(
            axis=axis,
            mode=CalculatorMode(record["mode"]),
            selected_preset=str(record["selectedBrickType"]),
            unit_length=str(record["brickLength"]),
            unit_height=str(record["brickHeight"]),
            mortar_joint=str(record["mortarJoint"]),
            connection=parse_connection(axis, record["connectionType"]),
            target_dimension=str(record["targetDimension"]),
            input_unit=LengthUnit(record["inputUnit"]),
            unit_count=str(record["numberOfUnits"]),
            output_unit=LengthUnit(record["outputUnit"]),
        )


def recompute(state: CalculatorState) -> Outcome[CalculationResult]:
    """
    Run the calculation selected by ``state.mode`` on the current inputs.

    Deterministic: the same state always yields the same outcome.
    """
    if state.mode is CalculatorMode.DIMENSION:
        return solve_forward(state.forward_request())  # type: ignore[return-value]
    return solve_inverse(state.inverse_request())  # type: ignore[return-value]


def format_dimension(value_mm: float, output_unit: LengthUnit) -> float:
    """A millimetre result expressed in the display unit."""
    return from_mm(value_mm, output_unit)
