from __future__ import annotations

import logging

from stat_metrics.logging_utils import setup_logger


def test_setup_logger_is_idempotent() -> None:
    logger = setup_logger("stat_metrics.tests.idempotent")
    again = setup_logger("stat_metrics.tests.idempotent")

    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
