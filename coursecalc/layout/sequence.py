"""
Bond layout: the order of full and half units along a course.

A solved length count such as 4.5 is laid as four full units and one half
unit. The half unit goes at the start of the course for a half-brick-left
bond and at the end for every other connection.
"""

from __future__ import annotations

import math

from coursecalc.utilities.types import ConnectionType, ForwardResult, LengthConnection

FULL_UNIT: float = 1.0
HALF_UNIT: float = 0.5


def unit_sequence(units: float, connection: ConnectionType) -> tuple[float, ...]:
    """
    Lay *units* out as a left-to-right run of FULL_UNIT and HALF_UNIT pieces.

    Returns an empty tuple when *units* is not positive.
    """
    if units <= 0:
        return ()
    pieces = [FULL_UNIT] * math.floor(units)
    if units % 1 != 0:
        if connection is LengthConnection.HALF_UNIT_LEFT:
            pieces.insert(0, HALF_UNIT)
        else:
            pieces.append(HALF_UNIT)
    return tuple(pieces)


def course_count(courses: float) -> int:
    """Number of courses drawn for a height result; part courses count whole."""
    return math.ceil(courses)


def sequence_for(result: ForwardResult, connection: ConnectionType) -> tuple[float, ...]:
    """unit_sequence for a solved ForwardResult."""
    return unit_sequence(result.units_required, connection)
