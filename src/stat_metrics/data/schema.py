"""Schema validation for prediction tables."""

from __future__ import annotations

import pandas as pd


def require_columns(df: pd.DataFrame, required: list[str] | tuple[str, ...], source: str) -> None:
    """Raise an error when any required column is missing from a predictions table."""

    missing = [column for column in required if column not in df.columns]
    if missing:
        raise KeyError(f"Table '{source}' is missing required columns: {missing}")


def require_complete(df: pd.DataFrame, columns: list[str] | tuple[str, ...], source: str) -> None:
    """Raise an error when any of ``columns`` contains missing values."""

    counts = {column: int(df[column].isna().sum()) for column in columns}
    incomplete = {column: count for column, count in counts.items() if count}
    if incomplete:
        raise ValueError(f"Table '{source}' has missing values: {incomplete}")
