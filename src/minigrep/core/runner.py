"""Read a file, filter its lines and write the matches."""
from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from minigrep.config.constants import DEFAULT_ENCODING
from minigrep.core.errors import MinigrepError
from minigrep.core.logging_config import get_logger
from minigrep.core.search import search

if TYPE_CHECKING:
    from minigrep.config.args import Config

logger = get_logger(__name__)


def read_contents(file_path: str, encoding: str = DEFAULT_ENCODING) -> str:
    """Load the whole file as text, wrapping any read or decode failure."""
    try:
        # newline="" keeps lone \r characters; line splitting is left to search
        with open(file_path, "r", encoding=encoding, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Failed to read %s: %s", file_path, e)
        raise MinigrepError.io_failure(e) from e


def run(
    config: "Config",
    out: TextIO | None = None,
    *,
    encoding: str = DEFAULT_ENCODING,
) -> list[str]:
    """
    Search ``config.file_path`` for ``config.query`` and print matches.

    The file is read completely before anything is written, so a failed
    read produces no output.

    Args:
        config: Query and file to search
        out: Destination for matched lines (defaults to stdout)
        encoding: Text encoding used to decode the file

    Returns:
        The matched lines, in file order

    Raises:
        MinigrepError: IO_FAILURE when the file cannot be read or decoded
    """
    contents = read_contents(config.file_path, encoding)
    matches = search(config.query, contents)
    logger.debug(
        "Scanned %d characters of %s, %d matching lines",
        len(contents),
        config.file_path,
        len(matches),
    )

    stream = out if out is not None else sys.stdout
    for line in matches:
        stream.write(f"{line}\n")
    return matches
