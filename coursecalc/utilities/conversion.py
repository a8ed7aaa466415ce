"""
Linear conversion between millimetres, centimetres and metres.

All solver arithmetic happens in millimetres; this module is the only place
other units are scaled in or out. All functions are pure.
"""

from __future__ import annotations

import math
from types import MappingProxyType

from .rounding import trim_precision
from .types import LengthUnit

MM_PER_UNIT: MappingProxyType[LengthUnit, float] = MappingProxyType(
    {
        LengthUnit.MM: 1.0,
        LengthUnit.CM: 10.0,
        LengthUnit.M: 1000.0,
    }
)


def convert_unit(value: float, from_unit: LengthUnit | str, to_unit: LengthUnit | str) -> float:
    """
    Rescale *value* from one length unit to another.

    Args:
        value: The quantity to convert.
        from_unit: Unit *value* is expressed in.
        to_unit: Unit to express the result in.

    Returns:
        The converted value, trimmed of floating-point noise (see
        ``trim_precision``). A non-finite *value* yields 0.0.

    Raises:
        ValueError: If either unit is not mm, cm or m.
    """
    if not math.isfinite(value):
        return 0.0
    result = value * MM_PER_UNIT[LengthUnit(from_unit)] / MM_PER_UNIT[LengthUnit(to_unit)]
    return trim_precision(result)


def to_mm(value: float, unit: LengthUnit | str) -> float:
    """Convert *value* in *unit* to millimetres."""
    return convert_unit(value, unit, LengthUnit.MM)


def from_mm(value_mm: float, unit: LengthUnit | str) -> float:
    """Convert a millimetre value to *unit*."""
    return convert_unit(value_mm, LengthUnit.MM, unit)
