"""Data models for minigrep."""
from minigrep.models.domain import LineSpan
from minigrep.models.enums import DiagnosticsStream, ErrorKind

__all__ = [
    "LineSpan",
    "DiagnosticsStream",
    "ErrorKind",
]
