#!/usr/bin/env python
"""Command-line entry point: minigrep <query> <file_path>"""
from __future__ import annotations

import sys
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape

from minigrep.config import Config, Settings
from minigrep.config.constants import USAGE
from minigrep.core import MinigrepError, run
from minigrep.core.logging_config import get_logger, setup_logging
from minigrep.models import DiagnosticsStream, ErrorKind

logger = get_logger(__name__)


def _diagnostics_console(settings: Settings) -> Console:
    stderr = settings.output.diagnostics_stream is DiagnosticsStream.STDERR
    return Console(stderr=stderr, highlight=False, emoji=False)


def _report(console: Console, prefix: str, err: MinigrepError) -> None:
    console.print(f"[red]{prefix}: {escape(str(err))}[/red]", soft_wrap=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point. Returns the process exit code."""
    args = list(sys.argv if argv is None else argv)

    if len(args) == 2 and args[1] == "--version":
        from minigrep import __version__

        print(__version__)
        return 0
    if len(args) == 2 and args[1] in ("-h", "--help"):
        print(USAGE)
        print()
        print("Print every line of <file_path> that contains <query>.")
        print()
        return 0

    settings = Settings.load()
    setup_logging(settings.logging)
    diagnostics = _diagnostics_console(settings)

    try:
        config = Config.build(args)
    except MinigrepError as e:
        _report(diagnostics, "Problem parsing arguments", e)
        return 1

    print(f"Searching for {config.query}")
    print(f"In file {config.file_path}")

    try:
        run(config, sys.stdout, encoding=settings.output.encoding)
    except MinigrepError as e:
        if e.kind is not ErrorKind.IO_FAILURE:
            raise
        logger.debug("Search aborted", exc_info=e.cause)
        _report(diagnostics, "Application error", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
