from .composer import compose_dimension, joint_count, solve_inverse
from .courses import discretise_units, ideal_units, solve_forward, units_for_dimension
from .errors import CalculationError, CalculationFailed, ErrorKind, Outcome

__all__ = [
    # result types
    "CalculationError",
    "CalculationFailed",
    "ErrorKind",
    "Outcome",
    # forward
    "ideal_units",
    "discretise_units",
    "units_for_dimension",
    "solve_forward",
    # inverse
    "joint_count",
    "compose_dimension",
    "solve_inverse",
]
