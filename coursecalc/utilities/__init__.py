"""
Shared utilities for the coursecalc masonry course calculator.

Provides the vocabulary types used by every other layer, millimetre-based
unit conversion, and the half-up rounding rules the solvers depend on.
"""

from .conversion import MM_PER_UNIT, convert_unit, from_mm, to_mm
from .rounding import round_half_up, round_to_half, round_to_hundredths, trim_precision
from .types import (
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
    connections_for_axis,
    default_connection,
    parse_connection,
)

__all__ = [
    # types
    "Axis",
    "ConnectionType",
    "HeightConnection",
    "LengthConnection",
    "LengthUnit",
    "UnitSpec",
    "ForwardRequest",
    "ForwardResult",
    "InverseRequest",
    "InverseResult",
    "connections_for_axis",
    "default_connection",
    "parse_connection",
    # conversion
    "MM_PER_UNIT",
    "convert_unit",
    "to_mm",
    "from_mm",
    # rounding
    "round_half_up",
    "round_to_half",
    "round_to_hundredths",
    "trim_precision",
]
