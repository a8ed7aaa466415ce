"""
coursecalc: masonry course calculator.

Converts a target wall dimension into a buildable number of bricks or
courses and back, for a given unit size, mortar joint and connection type.
"""

from coursecalc.solver import CalculationError, ErrorKind, Outcome, solve_forward, solve_inverse
from coursecalc.utilities import (
    Axis,
    ForwardRequest,
    ForwardResult,
    HeightConnection,
    InverseRequest,
    InverseResult,
    LengthConnection,
    LengthUnit,
    UnitSpec,
    convert_unit,
)

__version__ = "0.1.0"

__all__ = [
    "Axis",
    "LengthConnection",
    "HeightConnection",
    "LengthUnit",
    "UnitSpec",
    "ForwardRequest",
    "ForwardResult",
    "InverseRequest",
    "InverseResult",
    "CalculationError",
    "ErrorKind",
    "Outcome",
    "convert_unit",
    "solve_forward",
    "solve_inverse",
]
