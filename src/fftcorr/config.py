"""fftcorr configuration management."""

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator

# Default paths
DEFAULT_CONFIG_DIR = Path.home() / ".fftcorr"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "fftcorr.yaml"

LOG_LEVEL_ENV = "FFTCORR_LOG_LEVEL"


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """Configuration for logging (env var overrides the level at setup)."""
    level: LogLevel = "INFO"
    log_dir: str | None = None  # None = ~/.fftcorr/logs
    console: bool = True

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    def effective_level(self) -> str:
        """Return the configured level, or the validated env var override.

        The override is never stored, so save_config keeps the file's value.
        """
        env_level = os.getenv(LOG_LEVEL_ENV)
        if env_level:
            return LoggingConfig.model_validate({"level": env_level}).level
        return self.level

    def get_log_dir(self) -> Path:
        if self.log_dir:
            return Path(self.log_dir).expanduser()
        return DEFAULT_CONFIG_DIR / "logs"


class ErrorReportingConfig(BaseModel):
    """Configuration for how the pipeline boundary reports failures."""
    log_tracebacks: bool = False


class FftCorrConfig(BaseModel):
    """Main fftcorr configuration."""
    version: str = "1.0"
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    errors: ErrorReportingConfig = Field(default_factory=ErrorReportingConfig)


def load_config(config_path: Path | None = None) -> FftCorrConfig:
    """Load configuration from file or return defaults."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_FILE

    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f)
            if data:
                return FftCorrConfig.model_validate(data)

    return FftCorrConfig()


def save_config(config: FftCorrConfig, config_path: Path | None = None) -> None:
    """Save configuration to file."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_FILE

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
