"""Core search functionality."""
from minigrep.core.errors import MinigrepError
from minigrep.core.search import iter_line_spans, search, search_spans
from minigrep.core.runner import read_contents, run

__all__ = [
    "MinigrepError",
    "iter_line_spans",
    "search",
    "search_spans",
    "read_contents",
    "run",
]
