#!/usr/bin/env python3
"""Score a predictions table described by an evaluation config."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))


def main() -> int:
    parser = argparse.ArgumentParser(description="Compute regression metrics from an evaluation config.")
    parser.add_argument("--config", required=True, help="Path to evaluation config YAML.")
    parser.add_argument("--run-dir", default=None, help="Optional output directory override.")
    parser.add_argument("--verbose", action="store_true", help="Log per-group progress.")
    args = parser.parse_args()

    from stat_metrics.config import load_evaluation_config
    from stat_metrics.evaluation.workflow import evaluate_predictions
    from stat_metrics.logging_utils import setup_logger

    setup_logger(level=logging.INFO if args.verbose else logging.WARNING)

    try:
        cfg = load_evaluation_config(args.config)
        metrics_path = evaluate_predictions(cfg, args.run_dir)
    except (OSError, KeyError, ValueError) as exc:
        print(f"Evaluation failed: {exc}", file=sys.stderr)
        return 1

    print(f"Evaluation complete. Metrics file: {metrics_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
