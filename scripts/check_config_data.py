#!/usr/bin/env python3
"""Validate that an evaluation config is consistent with its predictions table."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Check that the configured predictions file exists and has the configured columns."
    )
    parser.add_argument("--config", required=True, help="Path to evaluation config YAML.")
    args = parser.parse_args()

    from stat_metrics.config import load_evaluation_config
    from stat_metrics.data.loader import iter_groups, load_predictions

    try:
        cfg = load_evaluation_config(args.config)
    except Exception as exc:
        print(f"Config load failed: {exc}", file=sys.stderr)
        return 1

    predictions_path = Path(cfg.data.predictions_path)
    if not predictions_path.exists():
        print(f"Predictions file not found: {predictions_path}", file=sys.stderr)
        return 1

    try:
        df = load_predictions(
            predictions_path,
            cfg.data.actual_column,
            cfg.data.predicted_column,
            cfg.data.group_column,
        )
    except Exception as exc:
        print(f"Predictions table validation failed: {exc}", file=sys.stderr)
        return 1

    groups = [group for group, _ in iter_groups(df, cfg.data.group_column)]
    print(f"Config data check passed: {args.config}")
    print(f"Predictions: {predictions_path} ({len(df)} rows)")
    print(f"Groups: {', '.join(groups)}")
    print(f"Metrics: {', '.join(cfg.metrics.selected)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
