from __future__ import annotations

from pathlib import Path

import pytest

from stat_metrics.config import load_evaluation_config

REPO_ROOT = Path(__file__).resolve().parents[1]


def _write_config(tmp_path: Path, lines: list[str]) -> Path:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("\n".join(lines), encoding="utf-8")
    return config_path


def test_load_example_config() -> None:
    cfg = load_evaluation_config(REPO_ROOT / "configs" / "evaluation" / "example.yaml")
    assert cfg.name == "example_regression"
    assert cfg.data.group_column == "split"
    assert cfg.metrics.num_features == 1
    assert "adjusted_r2" in cfg.metrics.selected
    assert cfg.runtime.run_name == "example_regression"


def test_defaults_skip_adjusted_r2_without_feature_count(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, ["name: minimal", "data:", "  predictions_path: preds.csv"])

    cfg = load_evaluation_config(config_path)
    assert cfg.data.actual_column == "y_true"
    assert cfg.data.predicted_column == "y_pred"
    assert cfg.data.group_column is None
    assert cfg.metrics.selected == ["mae", "mse", "rmse", "mape", "rmsle", "r2"]
    assert cfg.runtime.metrics_filename == "eval_metrics.json"


def test_unknown_metric_is_rejected(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        ["name: bad_metric", "data:", "  predictions_path: preds.csv", "metrics:", "  selected: [mae, f1]"],
    )
    with pytest.raises(ValueError, match="Unknown metrics"):
        load_evaluation_config(config_path)


def test_adjusted_r2_requires_feature_count(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        ["name: no_features", "data:", "  predictions_path: preds.csv", "metrics:", "  selected: [adjusted_r2]"],
    )
    with pytest.raises(ValueError, match="num_features is required"):
        load_evaluation_config(config_path)


def test_negative_feature_count_is_rejected(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        ["name: negative", "data:", "  predictions_path: preds.csv", "metrics:", "  num_features: -2"],
    )
    with pytest.raises(ValueError, match="num_features must be >= 0"):
        load_evaluation_config(config_path)


def test_identical_value_columns_are_rejected(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        ["name: same", "data:", "  predictions_path: preds.csv", "  actual_column: y", "  predicted_column: y"],
    )
    with pytest.raises(ValueError, match="must differ"):
        load_evaluation_config(config_path)


def test_missing_predictions_path_is_rejected(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, ["name: empty", "data: {}"])
    with pytest.raises(ValueError, match="predictions_path is required"):
        load_evaluation_config(config_path)


def test_non_mapping_root_is_rejected(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, ["- just", "- a list"])
    with pytest.raises(ValueError, match="Config root must be a mapping"):
        load_evaluation_config(config_path)
