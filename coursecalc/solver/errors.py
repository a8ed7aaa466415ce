"""
Error taxonomy and result type for the course solvers.

Solvers never raise for bad numeric input. They return an Outcome carrying
either a value or a CalculationError so the caller can surface the message
and drop any stale result from an earlier call. Outcome.unwrap() converts an
error into a CalculationFailed exception for callers that prefer raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, cast

from coursecalc.utilities.types import Axis

T = TypeVar("T")


class ErrorKind(str, Enum):
    INVALID_NUMBER = "invalid_number"  # a required field is NaN or infinite
    NON_POSITIVE_INPUT = "non_positive_input"  # size/target/count <= 0 or joint < 0
    DEGENERATE_UNIT = "degenerate_unit"  # unit + joint <= 0
    ZERO_UNITS_RESULT = "zero_units_result"  # discretised count <= 0


@dataclass(frozen=True)
class CalculationError:
    """A single recoverable calculation failure."""

    kind: ErrorKind
    message: str


class CalculationFailed(Exception):
    """Raised by Outcome.unwrap() when the outcome holds an error.

    Attributes:
        error: The CalculationError that caused the failure.
    """

    def __init__(self, error: CalculationError) -> None:
        super().__init__(error.message)
        self.error = error


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Exactly one of ``value`` or ``error`` is set."""

    value: T | None = None
    error: CalculationError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("Outcome requires exactly one of value or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise CalculationFailed(self.error)
        return cast(T, self.value)

    @classmethod
    def success(cls, value: T) -> Outcome[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: CalculationError) -> Outcome[T]:
        return cls(error=error)


# ── Messages ───────────────────────────────────────────────────────────────────


def _size_term(axis: Axis) -> str:
    return "length" if axis is Axis.LENGTH else "height"


def _count_term(axis: Axis) -> str:
    return "units" if axis is Axis.LENGTH else "courses"


def invalid_dimensions(kind: ErrorKind) -> CalculationError:
    return CalculationError(kind, "Please enter valid, positive numbers for all dimensions.")


def invalid_inputs(kind: ErrorKind) -> CalculationError:
    return CalculationError(kind, "Please enter valid, positive numbers for all inputs.")


def degenerate_unit(axis: Axis) -> CalculationError:
    return CalculationError(
        ErrorKind.DEGENERATE_UNIT,
        f"The effective unit {_size_term(axis)} (unit + mortar) must be positive.",
    )


def zero_units(axis: Axis) -> CalculationError:
    return CalculationError(
        ErrorKind.ZERO_UNITS_RESULT,
        f"Calculation resulted in zero or fewer {_count_term(axis)}. Please check your inputs.",
    )
