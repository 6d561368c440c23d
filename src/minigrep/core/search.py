"""Line filtering over in-memory file contents."""
from __future__ import annotations

from collections.abc import Iterator

from minigrep.models import LineSpan


def iter_line_spans(contents: str) -> Iterator[LineSpan]:
    """Yield the span of each line in *contents*.

    Lines end at ``\\n``; a single ``\\r`` before it is dropped so CRLF input
    yields the same lines as LF input. A trailing terminator does not produce
    an extra empty line.
    """
    start = 0
    length = len(contents)
    while start < length:
        newline = contents.find("\n", start)
        if newline == -1:
            yield LineSpan(start, length)
            return
        end = newline
        if end > start and contents[end - 1] == "\r":
            end -= 1
        yield LineSpan(start, end)
        start = newline + 1


def search_spans(query: str, contents: str) -> list[LineSpan]:
    """Return spans of lines containing *query*, in file order."""
    return [
        span
        for span in iter_line_spans(contents)
        if query in contents[span.start:span.end]
    ]


def search(query: str, contents: str) -> list[str]:
    """Return every line of *contents* that contains *query*.

    Matching is case-sensitive substring containment. An empty query
    matches every line. Order follows the file; each line appears once.

    Args:
        query: Substring to look for
        contents: Full text to scan

    Returns:
        Matching lines without their terminators
    """
    results: list[str] = []
    for start, end in iter_line_spans(contents):
        line = contents[start:end]
        if query in line:
            results.append(line)
    return results
