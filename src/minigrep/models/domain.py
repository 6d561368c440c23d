"""Domain models for minigrep."""
from __future__ import annotations

from typing import NamedTuple


class LineSpan(NamedTuple):
    """Offsets of one line inside the loaded contents, terminator excluded."""
    start: int
    end: int

    def text(self, contents: str) -> str:
        return contents[self.start:self.end]
