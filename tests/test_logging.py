"""Tests for logging setup."""

import logging

import pytest

from rich.logging import RichHandler

from fftcorr.boundary import PipelineBoundary
from fftcorr.config import FftCorrConfig, LoggingConfig
from fftcorr.errors import FftProcessing
from fftcorr.utils.logging import get_logger, setup_logging, setup_logging_from_config


def test_setup_logging_handlers(temp_dir, clean_logger):
    """Test console and file handlers are installed."""
    logger = setup_logging(level="DEBUG", log_dir=temp_dir)
    
    assert logger is clean_logger
    assert logger.level == logging.DEBUG
    assert any(isinstance(h, RichHandler) for h in logger.handlers)
    assert (temp_dir / "fftcorr.log").exists()
    assert (temp_dir / "error.log").exists()


def test_setup_logging_replaces_handlers(temp_dir, clean_logger):
    """Test repeated setup does not stack handlers."""
    setup_logging(log_dir=temp_dir, console=False)
    logger = setup_logging(log_dir=temp_dir, console=False)
    
    assert len(logger.handlers) == 2
    assert not any(isinstance(h, RichHandler) for h in logger.handlers)


def test_reported_error_reaches_error_log(temp_dir, clean_logger):
    """Test boundary failures are written verbatim to the error log."""
    setup_logging(log_dir=temp_dir, console=False)
    message = "spectrum contains NaN at bin 17 ✗"
    
    def failing_stage():
        raise FftProcessing(message)
    
    PipelineBoundary().call("inverse", failing_stage)
    
    for handler in clean_logger.handlers:
        handler.flush()
    
    error_log = (temp_dir / "error.log").read_text(encoding="utf-8")
    assert f"inverse failed: FFT processing error: {message}" in error_log
    assert "fftcorr.boundary" in error_log


def test_setup_logging_from_config(temp_dir, clean_logger, monkeypatch):
    """Test logging is configured from the config model."""
    monkeypatch.delenv("FFTCORR_LOG_LEVEL", raising=False)
    config = FftCorrConfig(
        logging=LoggingConfig(level="warning", log_dir=str(temp_dir / "logs"), console=False),
    )
    
    logger = setup_logging_from_config(config)
    
    assert logger.level == logging.WARNING
    assert (temp_dir / "logs" / "error.log").exists()


def test_get_logger():
    """Test module loggers live under the package logger."""
    assert get_logger().name == "fftcorr"
    assert get_logger("fftcorr.boundary").parent.name == "fftcorr"


def test_setup_logging_from_config_env_override(temp_dir, clean_logger, monkeypatch):
    """Test the env var level wins at setup time."""
    monkeypatch.setenv("FFTCORR_LOG_LEVEL", "error")
    config = FftCorrConfig(
        logging=LoggingConfig(level="INFO", log_dir=str(temp_dir), console=False),
    )
    
    logger = setup_logging_from_config(config)
    
    assert logger.level == logging.ERROR
    assert config.logging.level == "INFO"


def test_setup_logging_unknown_level(temp_dir, clean_logger):
    """Test an unknown level name is rejected."""
    with pytest.raises(ValueError, match="Unknown log level: verbose"):
        setup_logging(level="verbose", log_dir=temp_dir, console=False)
