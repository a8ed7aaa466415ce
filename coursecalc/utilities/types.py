"""
Core type definitions for course calculations.

Enums are the canonical vocabulary. Connection types are split into one
closed enumeration per axis so that a height-only connection can never be
paired with the length axis.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

# ── Enums ──────────────────────────────────────────────────────────────────────


class Axis(str, Enum):
    """Direction along which units are counted."""

    LENGTH = "length"  # units along a course, half units allowed
    HEIGHT = "height"  # courses up a wall, whole units only


class LengthUnit(str, Enum):
    MM = "mm"
    CM = "cm"
    M = "m"


class LengthConnection(str, Enum):
    """Boundary treatment for a run of units along the length axis."""

    BETWEEN_FACES = "CO-"
    OVERALL = "CO"
    OPENING_SIZE = "CO+"
    HALF_UNIT_LEFT = "HALF_BRICK_LEFT"
    HALF_UNIT_RIGHT = "HALF_BRICK_RIGHT"

    @property
    def axis(self) -> Axis:
        return Axis.LENGTH

    @property
    def is_opening(self) -> bool:
        return self is LengthConnection.OPENING_SIZE

    @property
    def forces_half_unit(self) -> bool:
        return self in (LengthConnection.HALF_UNIT_LEFT, LengthConnection.HALF_UNIT_RIGHT)


class HeightConnection(str, Enum):
    """Boundary treatment for a stack of courses along the height axis."""

    OVERALL = "OVERALL"  # to the top of the last course, no joint on top
    OPENING = "OPENING"  # to the underside of a lintel, joint on top included

    @property
    def axis(self) -> Axis:
        return Axis.HEIGHT

    @property
    def is_opening(self) -> bool:
        return self is HeightConnection.OPENING

    @property
    def forces_half_unit(self) -> bool:
        return False


ConnectionType = Union[LengthConnection, HeightConnection]

_CONNECTIONS_BY_AXIS: dict[Axis, type[LengthConnection] | type[HeightConnection]] = {
    Axis.LENGTH: LengthConnection,
    Axis.HEIGHT: HeightConnection,
}

_DEFAULT_CONNECTION: dict[Axis, ConnectionType] = {
    Axis.LENGTH: LengthConnection.BETWEEN_FACES,
    Axis.HEIGHT: HeightConnection.OVERALL,
}


def connections_for_axis(axis: Axis) -> tuple[ConnectionType, ...]:
    """All connection types valid on *axis*, in declaration order."""
    return tuple(_CONNECTIONS_BY_AXIS[axis])


def default_connection(axis: Axis) -> ConnectionType:
    """Connection selected when the calculator switches to *axis*."""
    return _DEFAULT_CONNECTION[axis]


def parse_connection(axis: Axis | str, text: str) -> ConnectionType:
    """
    Resolve *text* to a connection type on *axis*.

    Accepts the stored value (``"CO-"``, ``"OPENING"``) or the member name in
    any case (``"between_faces"``, ``"half-unit-left"``).

    Raises:
        ValueError: If *text* does not name a connection on *axis*.
    """
    axis = Axis(axis)
    enum_cls = _CONNECTIONS_BY_AXIS[axis]
    for member in enum_cls:
        if text == member.value:
            return member
    name = text.strip().upper().replace("-", "_").replace(" ", "_")
    if name in enum_cls.__members__:
        return enum_cls[name]
    valid = ", ".join(m.value for m in enum_cls)
    raise ValueError(f"unknown {axis.value} connection {text!r}; expected one of: {valid}")


# ── Calculation records ────────────────────────────────────────────────────────


@dataclass(frozen=True)
class UnitSpec:
    """
    Size of one brick or block along the axis being solved, plus its joint.

    Both values are in millimetres. Sanity of the numbers (finite, positive
    unit, non-negative joint) is checked by the solvers, which report a
    tagged error instead of raising.
    """

    unit_size: float
    mortar_joint: float

    @property
    def effective_size(self) -> float:
        """Pitch of one unit: the unit plus one mortar joint."""
        return self.unit_size + self.mortar_joint


@dataclass(frozen=True)
class ForwardRequest:
    """Target dimension to be filled with whole or half units."""

    target_dimension: float
    connection: ConnectionType
    unit_spec: UnitSpec
    unit: LengthUnit = LengthUnit.MM

    @property
    def axis(self) -> Axis:
        return self.connection.axis


@dataclass(frozen=True)
class ForwardResult:
    units_required: float  # multiple of 0.5 on LENGTH, integral on HEIGHT
    adjusted_dimension: float  # mm, 2 decimals


@dataclass(frozen=True)
class InverseRequest:
    """Unit count whose built dimension is wanted."""

    unit_count: float
    connection: ConnectionType
    unit_spec: UnitSpec

    @property
    def axis(self) -> Axis:
        return self.connection.axis


@dataclass(frozen=True)
class InverseResult:
    total_dimension: float  # mm, 2 decimals
