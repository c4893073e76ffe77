"""CSV loading helpers for prediction tables."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pandas as pd

from stat_metrics.data.schema import require_columns, require_complete

ALL_GROUPS = "all"


def load_predictions(
    path: str | Path,
    actual_column: str,
    predicted_column: str,
    group_column: str | None = None,
) -> pd.DataFrame:
    """Load a predictions CSV and check it holds complete numeric value columns."""

    source = str(path)
    df = pd.read_csv(path)

    required = [actual_column, predicted_column]
    if group_column is not None:
        required.append(group_column)
    require_columns(df, required, source)
    require_complete(df, [actual_column, predicted_column], source)

    for column in (actual_column, predicted_column):
        try:
            df[column] = df[column].astype("float64")
        except ValueError as exc:
            raise ValueError(f"Column '{column}' in '{source}' is not numeric.") from exc
    return df


def iter_groups(df: pd.DataFrame, group_column: str | None) -> Iterator[tuple[str, pd.DataFrame]]:
    """Yield ``(group_key, frame)`` pairs in sorted key order.

    Without a group column the whole table is yielded once under ``"all"``.
    """

    if group_column is None:
        yield ALL_GROUPS, df
        return

    for key, frame in df.groupby(group_column, sort=True):
        yield str(key), frame
