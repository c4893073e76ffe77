"""Numeric helpers shared by the regression metrics."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike


def validate_equal_length_nonempty(a: Sequence[float] | np.ndarray, b: Sequence[float] | np.ndarray) -> bool:
    """Return True when both sequences have the same, non-zero length."""

    return len(a) > 0 and len(a) == len(b)


def mean(values: ArrayLike) -> float:
    """Arithmetic mean, or NaN for an empty sequence."""

    values = np.asarray(values, dtype=np.float64)
    if values.size == 0:
        return float("nan")
    return float(np.sum(values) / values.size)


def sum_of_squared_deviations(values: ArrayLike, mean: float) -> float:
    """Sum of squared deviations from a precomputed mean."""

    values = np.asarray(values, dtype=np.float64)
    return float(np.sum((values - mean) ** 2))


# Short aliases for the validation and sum-of-squares helpers.
check_vectors = validate_equal_length_nonempty
sum_of_squares = sum_of_squared_deviations
