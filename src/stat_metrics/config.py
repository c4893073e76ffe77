"""Configuration models and YAML loading utilities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from stat_metrics.evaluation.report import METRIC_FUNCTIONS, REPORT_METRICS


@dataclass
class DataConfig:
    """Location and column layout of the predictions table."""

    predictions_path: str
    actual_column: str = "y_true"
    predicted_column: str = "y_pred"
    group_column: str | None = None

    def validate(self) -> None:
        if not self.predictions_path:
            raise ValueError("data.predictions_path must not be empty.")
        if not self.actual_column:
            raise ValueError("data.actual_column must not be empty.")
        if not self.predicted_column:
            raise ValueError("data.predicted_column must not be empty.")
        if self.actual_column == self.predicted_column:
            raise ValueError("data.actual_column and data.predicted_column must differ.")


@dataclass
class MetricsConfig:
    """Which metrics to report and the model size used by adjusted R²."""

    selected: list[str] = field(default_factory=lambda: list(METRIC_FUNCTIONS))
    num_features: int | None = None

    def validate(self) -> None:
        if not self.selected:
            raise ValueError("metrics.selected must not be empty.")
        unknown = sorted(set(self.selected) - set(REPORT_METRICS))
        if unknown:
            raise ValueError(f"Unknown metrics {unknown}. Expected a subset of {list(REPORT_METRICS)}.")
        if self.num_features is not None and self.num_features < 0:
            raise ValueError("metrics.num_features must be >= 0.")
        if "adjusted_r2" in self.selected and self.num_features is None:
            raise ValueError("metrics.num_features is required when adjusted_r2 is selected.")


@dataclass
class RuntimeConfig:
    """Output options."""

    output_dir: str = "outputs/evaluations"
    run_name: str = "evaluation"
    metrics_filename: str = "eval_metrics.json"


@dataclass
class EvaluationConfig:
    """Top-level evaluation configuration."""

    name: str
    data: DataConfig
    metrics: MetricsConfig = field(default_factory=MetricsConfig)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)

    def validate(self) -> None:
        if not self.name:
            raise ValueError("evaluation name must not be empty.")
        self.data.validate()
        self.metrics.validate()


def _optional_str(value: object) -> str | None:
    return None if value is None else str(value)


def _optional_int(value: object) -> int | None:
    return None if value is None else int(value)


def load_evaluation_config(path: str | Path) -> EvaluationConfig:
    """Load an evaluation config YAML file into typed dataclasses."""

    with Path(path).open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ValueError("Config root must be a mapping.")

    data_raw = raw.get("data") or {}
    metrics_raw = raw.get("metrics") or {}
    runtime_raw = raw.get("runtime") or {}

    if "predictions_path" not in data_raw:
        raise ValueError("data.predictions_path is required.")

    name = str(raw.get("name", "evaluation"))

    data_cfg = DataConfig(
        predictions_path=str(data_raw["predictions_path"]),
        actual_column=str(data_raw.get("actual_column", "y_true")),
        predicted_column=str(data_raw.get("predicted_column", "y_pred")),
        group_column=_optional_str(data_raw.get("group_column")),
    )

    num_features = _optional_int(metrics_raw.get("num_features"))
    default_selected = REPORT_METRICS if num_features is not None else tuple(METRIC_FUNCTIONS)
    metrics_cfg = MetricsConfig(
        selected=list(metrics_raw.get("selected", default_selected)),
        num_features=num_features,
    )

    runtime_cfg = RuntimeConfig(
        output_dir=str(runtime_raw.get("output_dir", "outputs/evaluations")),
        run_name=str(runtime_raw.get("run_name", name)),
        metrics_filename=str(runtime_raw.get("metrics_filename", "eval_metrics.json")),
    )

    cfg = EvaluationConfig(name=name, data=data_cfg, metrics=metrics_cfg, runtime=runtime_cfg)
    cfg.validate()
    return cfg
