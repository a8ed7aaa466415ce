"""
Dimension Composer: the dimension built by a given number of units.

Work-size connections charge one joint fewer than the unit count; opening
connections (coordinating size) charge one joint per unit. compose_dimension
is shared with the Course Solver so that a solved count always composes back
to the dimension the solver reports.
"""

from __future__ import annotations

import math

from coursecalc.utilities.rounding import round_to_hundredths
from coursecalc.utilities.types import ConnectionType, InverseRequest, InverseResult

from .errors import CalculationError, ErrorKind, Outcome, invalid_inputs


def joint_count(unit_count: float, connection: ConnectionType) -> float:
    """
    Number of mortar joints charged for *unit_count* units.

    A fractional boundary still costs a full joint, so 4.5 units of work size
    carry 4 joints. A single unit, or a lone half unit, carries none.
    """
    if connection.is_opening:
        return unit_count
    return float(math.ceil(unit_count - 1 if unit_count > 1 else 0))


def compose_dimension(
    unit_count: float,
    unit_size: float,
    mortar_joint: float,
    connection: ConnectionType,
) -> float:
    """Total dimension in mm of *unit_count* units, rounded to 2 decimals."""
    total = unit_count * unit_size + joint_count(unit_count, connection) * mortar_joint
    return round_to_hundredths(total)


def check_inverse_inputs(
    unit_count: float, unit_size: float, mortar_joint: float
) -> CalculationError | None:
    """Return the error for the first failed sanity check, or None."""
    if not all(math.isfinite(v) for v in (unit_count, unit_size, mortar_joint)):
        return invalid_inputs(ErrorKind.INVALID_NUMBER)
    if unit_count <= 0 or unit_size <= 0 or mortar_joint < 0:
        return invalid_inputs(ErrorKind.NON_POSITIVE_INPUT)
    return None


def solve_inverse(request: InverseRequest) -> Outcome[InverseResult]:
    """
    Compute the dimension produced by ``request.unit_count`` units.

    Returns:
        Outcome holding an InverseResult, or a CalculationError of kind
        INVALID_NUMBER or NON_POSITIVE_INPUT. A total too large to represent
        is reported as INVALID_NUMBER. Never raises for bad numbers.
    """
    spec = request.unit_spec
    error = check_inverse_inputs(request.unit_count, spec.unit_size, spec.mortar_joint)
    if error is not None:
        return Outcome.failure(error)

    total = compose_dimension(
        request.unit_count, spec.unit_size, spec.mortar_joint, request.connection
    )
    if not math.isfinite(total):
        return Outcome.failure(invalid_inputs(ErrorKind.INVALID_NUMBER))
    return Outcome.success(InverseResult(total_dimension=total))
