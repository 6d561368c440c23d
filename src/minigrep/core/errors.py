"""Error type raised by minigrep operations."""
from __future__ import annotations

from minigrep.models.enums import ErrorKind

NOT_ENOUGH_ARGUMENTS = "not enough arguments"


class MinigrepError(RuntimeError):
    """Failure tagged with an ErrorKind.

    INSUFFICIENT_ARGUMENTS carries no cause and a fixed message.
    IO_FAILURE carries the underlying exception as ``cause``.
    """

    def __init__(self, kind: ErrorKind, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.cause = cause

    @classmethod
    def insufficient_arguments(cls) -> "MinigrepError":
        return cls(ErrorKind.INSUFFICIENT_ARGUMENTS, NOT_ENOUGH_ARGUMENTS)

    @classmethod
    def io_failure(cls, cause: BaseException) -> "MinigrepError":
        return cls(ErrorKind.IO_FAILURE, str(cause), cause)
