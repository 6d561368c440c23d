from __future__ import annotations

__version__ = "0.1.0"
__author__ = "minigrep Contributors"

from minigrep.models import ErrorKind, LineSpan
from minigrep.config import Config
from minigrep.core import MinigrepError, run, search, search_spans

__all__ = [
    "Config",
    "ErrorKind",
    "LineSpan",
    "MinigrepError",
    "run",
    "search",
    "search_spans",
]
