"""Command-line arguments for a single search."""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from minigrep.core.errors import MinigrepError


@dataclass(frozen=True)
class Config:
    """Query and target file for one invocation."""
    query: str
    file_path: str

    @classmethod
    def build(cls, args: Sequence[str]) -> "Config":
        """
        Build a Config from a full argument vector.

        ``args[0]`` is the program invocation and is ignored, as is anything
        past ``args[2]``. Neither the query nor the path is checked here.

        Raises:
            MinigrepError: INSUFFICIENT_ARGUMENTS when fewer than 3 items
        """
        if len(args) < 3:
            raise MinigrepError.insufficient_arguments()
        return cls(query=str(args[1]), file_path=str(args[2]))
