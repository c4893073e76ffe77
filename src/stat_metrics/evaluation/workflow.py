"""Evaluation workflow over a configured predictions table."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pandas as pd

from stat_metrics.config import EvaluationConfig
from stat_metrics.data.loader import ALL_GROUPS, iter_groups, load_predictions
from stat_metrics.evaluation.report import regression_report

logger = logging.getLogger(__name__)


def _score(cfg: EvaluationConfig, group: str, df: pd.DataFrame) -> dict[str, float | str | int | None]:
    actual = df[cfg.data.actual_column].to_numpy()
    predicted = df[cfg.data.predicted_column].to_numpy()
    report = regression_report(actual, predicted, cfg.metrics.num_features).to_dict()

    record: dict[str, float | str | int | None] = {"group": group, "n_samples": report["n_samples"]}
    for name in cfg.metrics.selected:
        record[name] = report[name]
    return record


def evaluate_predictions(cfg: EvaluationConfig, run_dir: str | None = None) -> Path:
    """Score the configured predictions table and return the metrics file path."""

    output_dir = Path(run_dir) if run_dir else Path(cfg.runtime.output_dir) / cfg.runtime.run_name
    output_dir.mkdir(parents=True, exist_ok=True)

    df = load_predictions(
        cfg.data.predictions_path,
        cfg.data.actual_column,
        cfg.data.predicted_column,
        cfg.data.group_column,
    )
    logger.info("Loaded %d predictions from %s", len(df), cfg.data.predictions_path)

    records: list[dict[str, float | str | int | None]] = []
    for group, frame in iter_groups(df, cfg.data.group_column):
        record = _score(cfg, group, frame)
        logger.info("Scored group '%s' (%d samples)", group, record["n_samples"])
        records.append(record)

    if cfg.data.group_column is not None:
        records.append(_score(cfg, ALL_GROUPS, df))

    metrics_path = output_dir / cfg.runtime.metrics_filename
    with metrics_path.open("w", encoding="utf-8") as f:
        json.dump(records, f, indent=2)

    logger.info("Wrote %d metric record(s) to %s", len(records), metrics_path)
    return metrics_path
