"""
Runtime settings with environment variable and .env support.

Settings precedence (highest to lowest):
1. Environment variables (MINIGREP_*)
2. Settings file (explicit path, or ~/.minigrep/config/settings.toml)
3. Hardcoded constants (constants.py)

Settings only shape logging and output; they never change what matches.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path

import tomli
from dotenv import load_dotenv

from ..core.logging_config import LogConfig
from ..models.enums import DiagnosticsStream
from .constants import (
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_DATA_DIR,
    DEFAULT_DIAGNOSTICS_STREAM,
    DEFAULT_ENCODING,
    DEFAULT_LOG_LEVEL,
    ENV_DATA_DIR,
    ENV_DIAGNOSTICS_STREAM,
    ENV_ENCODING,
    ENV_FILE,
    ENV_LOG_FILE,
    ENV_LOG_LEVEL,
    ERROR_NO_SETTINGS,
    SETTINGS_FILE,
)


# Load .env files at module import time
# Search order: ./.env, ~/.minigrep/.env
def _load_env_files():
    """Load .env files from standard locations."""
    env_locations = [
        Path.cwd() / ENV_FILE,
        DEFAULT_DATA_DIR / ENV_FILE,
    ]

    for env_path in env_locations:
        if env_path.exists():
            load_dotenv(env_path, override=False)  # Don't override already-set vars


_load_env_files()


def _get_env_str(key: str, default: str | None = None) -> str | None:
    """Get string value from environment variable. Empty strings are treated as missing."""
    value = os.getenv(key)
    if value is None or value == "":
        return default
    return value


def _load_logging(data: dict) -> LogConfig:
    """Create LogConfig from the [logging] table with environment overrides."""
    known = {f.name for f in fields(LogConfig)}
    config = LogConfig(**{k: v for k, v in data.items() if k in known})
    config.level = _get_env_str(ENV_LOG_LEVEL, config.level) or DEFAULT_LOG_LEVEL
    log_file = _get_env_str(ENV_LOG_FILE)
    if log_file is not None:
        config.file_enabled = True
        config.file_path = log_file
    return config


@dataclass
class OutputConfig:
    diagnostics_stream: DiagnosticsStream
    encoding: str

    @classmethod
    def from_dict(cls, data: dict) -> "OutputConfig":
        """Create OutputConfig from dict with environment variable overrides."""
        stream = _get_env_str(
            ENV_DIAGNOSTICS_STREAM,
            data.get("diagnostics_stream", DEFAULT_DIAGNOSTICS_STREAM),
        ) or DEFAULT_DIAGNOSTICS_STREAM
        try:
            diagnostics_stream = DiagnosticsStream(stream.lower())
        except ValueError:
            diagnostics_stream = DiagnosticsStream(DEFAULT_DIAGNOSTICS_STREAM)

        return cls(
            diagnostics_stream=diagnostics_stream,
            encoding=_get_env_str(
                ENV_ENCODING,
                data.get("encoding", DEFAULT_ENCODING),
            ) or DEFAULT_ENCODING,
        )


@dataclass
class Settings:
    output: OutputConfig
    logging: LogConfig

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Settings":
        """
        Load settings with proper precedence.

        Args:
            config_path: Optional explicit settings file path

        Returns:
            Loaded Settings object

        Raises:
            FileNotFoundError: If an explicit settings path does not exist
        """
        if config_path is not None:
            settings_file = Path(config_path)
        else:
            base_data_dir = Path(os.getenv(ENV_DATA_DIR, str(DEFAULT_DATA_DIR))).expanduser()
            settings_file = base_data_dir / DEFAULT_CONFIG_SUBDIR / SETTINGS_FILE

        if settings_file.exists():
            with open(settings_file, "rb") as f:
                data = tomli.load(f)
        elif config_path is not None:
            raise FileNotFoundError(
                ERROR_NO_SETTINGS.format(
                    path=config_path,
                    settings_file=SETTINGS_FILE,
                    config_dir=DEFAULT_DATA_DIR / DEFAULT_CONFIG_SUBDIR,
                )
            )
        else:
            data = {}

        return cls(
            output=OutputConfig.from_dict(data.get("output", {})),
            logging=_load_logging(data.get("logging", {})),
        )
