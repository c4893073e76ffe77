from __future__ import annotations

import math

import numpy as np

from stat_metrics.numeric import (
    check_vectors,
    mean,
    sum_of_squared_deviations,
    sum_of_squares,
    validate_equal_length_nonempty,
)


def test_validate_accepts_equal_nonempty_sequences() -> None:
    assert validate_equal_length_nonempty([1.0, 2.0, 3.0], [1.1, 2.1, 3.2])


def test_validate_rejects_length_mismatch() -> None:
    assert not validate_equal_length_nonempty([1.0, 2.0, 3.0], [1.0, 2.0])


def test_validate_rejects_empty_sequences() -> None:
    assert not validate_equal_length_nonempty([], [])
    assert not validate_equal_length_nonempty(np.array([]), np.array([]))


def test_mean_expected_value() -> None:
    assert mean([1.0, 2.0, 3.0, 4.0]) == 2.5


def test_mean_of_empty_sequence_is_nan() -> None:
    assert math.isnan(mean([]))


def test_sum_of_squared_deviations_uses_given_mean() -> None:
    values = [1.0, 2.0, 3.0, 4.0]
    assert sum_of_squared_deviations(values, 2.5) == 5.0
    # mean is not recomputed internally
    assert sum_of_squared_deviations(values, 0.0) == 30.0


def test_short_aliases_point_at_helpers() -> None:
    assert check_vectors is validate_equal_length_nonempty
    assert sum_of_squares([1.0, 2.0, 3.0, 4.0], 2.5) == 5.0
