"""Closed-form regression metrics.

Every two-sequence metric returns ``nan`` instead of raising when the inputs
differ in length or are empty. Callers check the result with ``math.isnan``.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from stat_metrics.numeric import mean, sum_of_squared_deviations, validate_equal_length_nonempty

EPSILON = float(np.finfo(np.float64).eps)


def _as_pair(actual: ArrayLike, predicted: ArrayLike) -> tuple[np.ndarray, np.ndarray] | None:
    y_true = np.asarray(actual, dtype=np.float64).reshape(-1)
    y_pred = np.asarray(predicted, dtype=np.float64).reshape(-1)
    if not validate_equal_length_nonempty(y_true, y_pred):
        return None
    return y_true, y_pred


def mean_absolute_error(actual: ArrayLike, predicted: ArrayLike) -> float:
    """Mean absolute error, in the units of the target."""

    pair = _as_pair(actual, predicted)
    if pair is None:
        return float("nan")
    y_true, y_pred = pair
    return float(np.sum(np.abs(y_true - y_pred)) / y_true.size)


def mean_squared_error(actual: ArrayLike, predicted: ArrayLike) -> float:
    """Mean squared error, in squared target units."""

    pair = _as_pair(actual, predicted)
    if pair is None:
        return float("nan")
    y_true, y_pred = pair
    return float(np.sum((y_true - y_pred) ** 2) / y_true.size)


def root_mean_squared_error(actual: ArrayLike, predicted: ArrayLike) -> float:
    """Square root of :func:`mean_squared_error`; NaN propagates from it."""

    return float(np.sqrt(mean_squared_error(actual, predicted)))


def mean_absolute_percentage_error(actual: ArrayLike, predicted: ArrayLike) -> float:
    """Mean absolute percentage error, expressed in percent.

    Observations whose true value is smaller in magnitude than machine epsilon
    are left out of the sum, but the average is still taken over all ``n``
    observations. A table with zero targets therefore reports a lower MAPE
    than the non-zero rows alone would.
    """

    pair = _as_pair(actual, predicted)
    if pair is None:
        return float("nan")
    y_true, y_pred = pair

    # NaN targets stay in the sum and make the result NaN.
    usable = ~(np.abs(y_true) < EPSILON)
    total = np.sum(np.abs((y_true[usable] - y_pred[usable]) / y_true[usable]))
    return float(total / y_true.size * 100.0)


def root_mean_squared_log_error(actual: ArrayLike, predicted: ArrayLike) -> float:
    """Root mean squared error between ``log(1 + y)`` values.

    Values at or below -1 are not rejected: the logarithm's ``nan`` or
    ``-inf`` flows into the result.
    """

    pair = _as_pair(actual, predicted)
    if pair is None:
        return float("nan")
    y_true, y_pred = pair

    with np.errstate(divide="ignore", invalid="ignore"):
        log_diff = np.log(y_true + 1.0) - np.log(y_pred + 1.0)
        return float(np.sqrt(np.sum(log_diff**2) / y_true.size))


def r_squared(actual: ArrayLike, predicted: ArrayLike) -> float:
    """Coefficient of determination, ``1 - SS_res / SS_tot``.

    When ``actual`` has no variance the fit is reported as perfect (1.0)
    regardless of ``predicted``. Values below zero mean the model does worse
    than predicting the mean.
    """

    pair = _as_pair(actual, predicted)
    if pair is None:
        return float("nan")
    y_true, y_pred = pair

    mean_y = mean(y_true)
    ss_res = float(np.sum((y_true - y_pred) ** 2))
    ss_tot = sum_of_squared_deviations(y_true, mean_y)

    if abs(ss_tot) < EPSILON:
        return 1.0
    return 1.0 - ss_res / ss_tot


def adjusted_r_squared(actual: ArrayLike, predicted: ArrayLike, num_features: int) -> float:
    """R² penalised for the number of model features.

    ``1 - (1 - R²) * (n - 1) / (n - p - 1)``. Returns NaN when the residual
    degrees of freedom ``n - p - 1`` are not positive.
    """

    n = np.asarray(actual, dtype=np.float64).size
    if num_features < 0 or n <= num_features + 1:
        return float("nan")

    r2 = r_squared(actual, predicted)
    return 1.0 - (1.0 - r2) * (n - 1) / (n - num_features - 1)
