"""Regression metrics and the numeric helpers behind them."""

from stat_metrics.evaluation.metrics import (
    adjusted_r_squared,
    mean_absolute_error,
    mean_absolute_percentage_error,
    mean_squared_error,
    r_squared,
    root_mean_squared_error,
    root_mean_squared_log_error,
)
from stat_metrics.numeric import (
    check_vectors,
    mean,
    sum_of_squared_deviations,
    sum_of_squares,
    validate_equal_length_nonempty,
)

__all__ = [
    "adjusted_r_squared",
    "check_vectors",
    "mean",
    "mean_absolute_error",
    "mean_absolute_percentage_error",
    "mean_squared_error",
    "r_squared",
    "root_mean_squared_error",
    "root_mean_squared_log_error",
    "sum_of_squared_deviations",
    "sum_of_squares",
    "validate_equal_length_nonempty",
]
