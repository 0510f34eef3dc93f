"""Tests for loguru sink setup."""

import sys

import pytest
from loguru import logger

from botemu.config.schema import LoggingConfig
from botemu.utils.logging import setup_logging


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_file_sinks(self, tmp_path):
        setup_logging(LoggingConfig(level="DEBUG", directory=str(tmp_path / "logs")))

        logger.info("combined only")
        logger.error("both files")
        logger.complete()

        combined = (tmp_path / "logs" / "combined.log").read_text()
        errors = (tmp_path / "logs" / "error.log").read_text()
        assert "combined only" in combined
        assert "both files" in combined
        assert "both files" in errors
        assert "combined only" not in errors

    def test_console_only(self, tmp_path):
        setup_logging(LoggingConfig(level="WARNING"))

        logger.warning("console")

        assert not list(tmp_path.iterdir())
