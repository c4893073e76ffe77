"""Bundle every regression metric into one report object."""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Callable

from numpy.typing import ArrayLike

from stat_metrics.evaluation.metrics import (
    adjusted_r_squared,
    mean_absolute_error,
    mean_absolute_percentage_error,
    mean_squared_error,
    r_squared,
    root_mean_squared_error,
    root_mean_squared_log_error,
)
from stat_metrics.numeric import validate_equal_length_nonempty

logger = logging.getLogger(__name__)

METRIC_FUNCTIONS: dict[str, Callable[[ArrayLike, ArrayLike], float]] = {
    "mae": mean_absolute_error,
    "mse": mean_squared_error,
    "rmse": root_mean_squared_error,
    "mape": mean_absolute_percentage_error,
    "rmsle": root_mean_squared_log_error,
    "r2": r_squared,
}

REPORT_METRICS: tuple[str, ...] = (*METRIC_FUNCTIONS, "adjusted_r2")


@dataclass(frozen=True)
class RegressionReport:
    """Container for the regression metrics of one prediction set."""

    n_samples: int
    mae: float
    mse: float
    rmse: float
    mape: float
    rmsle: float
    r2: float
    adjusted_r2: float

    def to_dict(self) -> dict[str, float | int | None]:
        """Plain mapping with NaN replaced by None so it serialises to JSON null."""

        out: dict[str, float | int | None] = {}
        for key, value in asdict(self).items():
            if isinstance(value, float) and math.isnan(value):
                out[key] = None
            else:
                out[key] = value
        return out


def regression_report(
    actual: ArrayLike,
    predicted: ArrayLike,
    num_features: int | None = None,
) -> RegressionReport:
    """Compute all metrics for one pair of sequences.

    ``adjusted_r2`` is NaN when ``num_features`` is not given. Invalid input
    never raises; the affected fields are NaN.
    """

    if not validate_equal_length_nonempty(actual, predicted):
        logger.warning(
            "Cannot score predictions: %d actual vs %d predicted values.",
            len(actual),
            len(predicted),
        )

    values = {name: fn(actual, predicted) for name, fn in METRIC_FUNCTIONS.items()}
    if num_features is None:
        adjusted = float("nan")
    else:
        adjusted = adjusted_r_squared(actual, predicted, num_features)

    return RegressionReport(n_samples=len(actual), adjusted_r2=adjusted, **values)
