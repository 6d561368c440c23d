"""Configuration management."""
from minigrep.config.args import Config
from minigrep.config.settings import OutputConfig, Settings

__all__ = [
    "Config",
    "OutputConfig",
    "Settings",
]
