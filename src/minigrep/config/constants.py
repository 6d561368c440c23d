"""
Constants and default values for minigrep.
"""

from pathlib import Path

# ============================================================================
# Application Metadata
# ============================================================================

APP_NAME = "minigrep"
CONFIG_DIR_NAME = ".minigrep"

# ============================================================================
# Path Defaults
# ============================================================================

DEFAULT_DATA_DIR = Path.home() / CONFIG_DIR_NAME
DEFAULT_CONFIG_SUBDIR = "config"

SETTINGS_FILE = "settings.toml"
ENV_FILE = ".env"

# ============================================================================
# Runtime Defaults
# ============================================================================

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_ENCODING = "utf-8"
DEFAULT_DIAGNOSTICS_STREAM = "stdout"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_DATA_DIR = "MINIGREP_DATA_DIR"
ENV_LOG_LEVEL = "MINIGREP_LOG_LEVEL"
ENV_LOG_FILE = "MINIGREP_LOG_FILE"
ENV_DIAGNOSTICS_STREAM = "MINIGREP_DIAGNOSTICS_STREAM"
ENV_ENCODING = "MINIGREP_ENCODING"

# ============================================================================
# Messages
# ============================================================================

USAGE = "Usage: minigrep <query> <file_path>"

ERROR_NO_SETTINGS = """
Settings file not found: {path}

Create {settings_file} under {config_dir} or omit the explicit path
to run with built-in defaults.
"""
