"""Enumerations for minigrep."""
from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Failure categories surfaced to the entry point."""
    INSUFFICIENT_ARGUMENTS = "insufficient_arguments"
    IO_FAILURE = "io_failure"


class DiagnosticsStream(Enum):
    """Stream that receives user-facing diagnostics."""
    STDOUT = "stdout"
    STDERR = "stderr"
