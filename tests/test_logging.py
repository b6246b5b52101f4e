"""Tests for the shared logger factory."""

import logging

from pystatsepi._config import settings
from pystatsepi._logging import get_logger
from pystatsepi.samplesize import CaseControlParams, sample_size_case_control


class TestGetLogger:

    def test_single_handler(self):
        a = get_logger("pystatsepi.tests.example")
        b = get_logger("pystatsepi.tests.example")
        assert a is b
        assert len(a.handlers) == 1

    def test_level_from_settings(self):
        logger = get_logger("pystatsepi.tests.level")
        assert logger.level == logging.getLevelName(settings.LOG_LEVEL)

    def test_error_results_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="pystatsepi.samplesize._casecontrol"):
            sample_size_case_control(CaseControlParams(exposure_controls=30, odds_ratio=1.0))
        assert "indistinguishable from 1" in caplog.text
