"""Tests for the scrape_qiita entry point script."""

import logging
from unittest.mock import patch

from scripts.scrape_qiita import main, setup_logging
from src.qiita_export.pipeline import ExportStats


class TestMain:
    """Tests for the zero-argument entry point."""

    def test_runs_export_and_returns_zero(self):
        with (
            patch("scripts.scrape_qiita.setup_logging") as mock_logging,
            patch("scripts.scrape_qiita.run_export", return_value=ExportStats()) as mock_run,
        ):
            assert main() == 0

        mock_logging.assert_called_once()
        mock_run.assert_called_once_with()


class TestSetupLogging:
    """Tests for logging configuration."""

    def test_quietens_http_loggers(self):
        setup_logging("DEBUG")

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING
