"""Logging configuration for fftcorr."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from fftcorr.config import DEFAULT_CONFIG_DIR, FftCorrConfig


def setup_logging(
    level: str = "INFO",
    log_dir: Path | None = None,
    console: bool = True,
) -> logging.Logger:
    """Set up logging for fftcorr.
    
    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for log files (defaults to ~/.fftcorr/logs)
        console: Whether to log to console
        
    Returns:
        Configured logger
    """
    if log_dir is None:
        log_dir = DEFAULT_CONFIG_DIR / "logs"
    
    log_dir.mkdir(parents=True, exist_ok=True)
    
    logger = logging.getLogger("fftcorr")
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")
    logger.setLevel(numeric_level)
    
    # Replace handlers from a previous call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    
    if console:
        console_handler = RichHandler(
            console=Console(stderr=True),
            show_time=True,
            show_path=False,
            rich_tracebacks=True,
        )
        console_handler.setLevel(logging.DEBUG)
        logger.addHandler(console_handler)
    
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    
    main_handler = logging.FileHandler(log_dir / "fftcorr.log", encoding="utf-8")
    main_handler.setLevel(logging.INFO)
    main_handler.setFormatter(formatter)
    logger.addHandler(main_handler)
    
    error_handler = logging.FileHandler(log_dir / "error.log", encoding="utf-8")
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)
    logger.addHandler(error_handler)
    
    return logger


def setup_logging_from_config(config: FftCorrConfig) -> logging.Logger:
    """Set up logging from the logging section of a config."""
    return setup_logging(
        level=config.logging.effective_level(),
        log_dir=config.logging.get_log_dir(),
        console=config.logging.console,
    )


def get_logger(name: str = "fftcorr") -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
