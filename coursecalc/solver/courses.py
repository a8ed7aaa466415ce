"""
Course Solver: the number of units that best fills a target dimension.

Pipeline for one request:

  1. target → millimetres                   (Unit Converter)
  2. ideal  = continuous unit count          (work size adds one joint back;
                                              opening size does not)
  3. units  = ideal discretised              (half units on LENGTH, whole
                                              courses on HEIGHT, forced .5 for
                                              half-unit bonds)
  4. adjusted dimension = compose(units)     (Dimension Composer)

All rounding is half up. In the half-unit bond branch round(ideal - 0.5) is
floor(ideal), so the count is the nearest n + 0.5, ties going to the larger
count just as the plain half-unit branch does.
"""

from __future__ import annotations

import math

from coursecalc.utilities.conversion import to_mm
from coursecalc.utilities.rounding import round_half_up, round_to_half
from coursecalc.utilities.types import Axis, ConnectionType, ForwardRequest, ForwardResult

from .composer import compose_dimension
from .errors import (
    CalculationError,
    ErrorKind,
    Outcome,
    degenerate_unit,
    invalid_dimensions,
    zero_units,
)


def ideal_units(
    target_mm: float, unit_size: float, mortar_joint: float, connection: ConnectionType
) -> float:
    """Continuous (non-integer) unit count for a target in mm."""
    effective = unit_size + mortar_joint
    if connection.is_opening:
        return target_mm / effective
    return (target_mm + mortar_joint) / effective


def discretise_units(ideal: float, connection: ConnectionType) -> float:
    """Snap a continuous count to a buildable one for the connection's axis."""
    if connection.forces_half_unit:
        full_units = round_half_up(ideal - 0.5)
        return max(0.5, full_units + 0.5)
    if connection.axis is Axis.LENGTH:
        return round_to_half(ideal)
    return round_half_up(ideal)


def units_for_dimension(
    target_mm: float, unit_size: float, mortar_joint: float, connection: ConnectionType
) -> float:
    """Buildable unit count for *target_mm*, without validation."""
    return discretise_units(ideal_units(target_mm, unit_size, mortar_joint, connection), connection)


def check_forward_inputs(
    target: float, unit_size: float, mortar_joint: float, axis: Axis
) -> CalculationError | None:
    """Return the error for the first failed sanity check, or None."""
    if not all(math.isfinite(v) for v in (target, unit_size, mortar_joint)):
        return invalid_dimensions(ErrorKind.INVALID_NUMBER)
    if target <= 0 or unit_size <= 0 or mortar_joint < 0:
        return invalid_dimensions(ErrorKind.NON_POSITIVE_INPUT)
    if unit_size + mortar_joint <= 0:
        return degenerate_unit(axis)
    return None


def solve_forward(request: ForwardRequest) -> Outcome[ForwardResult]:
    """
    Find the unit count and adjusted dimension for a target dimension.

    Args:
        request: Target dimension (in ``request.unit``), connection type and
            unit size. The axis follows from the connection type.

    Returns:
        Outcome holding a ForwardResult, or a CalculationError whose kind is
        one of INVALID_NUMBER, NON_POSITIVE_INPUT, DEGENERATE_UNIT or
        ZERO_UNITS_RESULT. A unit pitch so small that the count overflows is
        DEGENERATE_UNIT. No partial result accompanies an error.
    """
    spec = request.unit_spec
    axis = request.axis
    error = check_forward_inputs(request.target_dimension, spec.unit_size, spec.mortar_joint, axis)
    if error is not None:
        return Outcome.failure(error)

    target_mm = to_mm(request.target_dimension, request.unit)
    if not math.isfinite(target_mm):
        return Outcome.failure(invalid_dimensions(ErrorKind.INVALID_NUMBER))
    ideal = ideal_units(target_mm, spec.unit_size, spec.mortar_joint, request.connection)
    if not math.isfinite(ideal):
        return Outcome.failure(degenerate_unit(axis))
    units = discretise_units(ideal, request.connection)
    if units <= 0:
        return Outcome.failure(zero_units(axis))

    adjusted = compose_dimension(units, spec.unit_size, spec.mortar_joint, request.connection)
    if not math.isfinite(adjusted):
        return Outcome.failure(invalid_dimensions(ErrorKind.INVALID_NUMBER))
    return Outcome.success(ForwardResult(units_required=units, adjusted_dimension=adjusted))
