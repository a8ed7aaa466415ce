from .sequence import FULL_UNIT, HALF_UNIT, course_count, sequence_for, unit_sequence

__all__ = [
    "FULL_UNIT",
    "HALF_UNIT",
    "unit_sequence",
    "sequence_for",
    "course_count",
]
