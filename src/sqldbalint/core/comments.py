"""Line-by-line comment tracking for SQL scripts.

Comment detection is lexical only: a ``--`` or ``/*`` inside a string
literal is treated as a real comment marker.
"""

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

LINE_COMMENT = "--"
BLOCK_OPEN = "/*"
BLOCK_CLOSE = "*/"

Span = Tuple[int, int]


@dataclass(frozen=True)
class LineScan:
    """Live code spans of one line and the comment state for the next."""

    live: Tuple[Span, ...]
    in_block_comment: bool


def _add_span(spans: List[Span], start: int, end: int) -> None:
    if end > start:
        spans.append((start, end))


def update(line: str, in_block_comment: bool) -> LineScan:
    """Scan one line given the block comment state left by the previous line.

    Args:
        line: Text of the line, without its line terminator
        in_block_comment: True if an unterminated ``/*`` precedes the line

    Returns:
        LineScan with the (start, end) column ranges of live code and the
        block comment state at the end of the line.
    """
    spans: List[Span] = []
    pos = 0
    state = in_block_comment

    while True:
        if state:
            close = line.find(BLOCK_CLOSE, pos)
            if close == -1:
                break
            pos = close + len(BLOCK_CLOSE)
            state = False
            continue

        opener = line.find(BLOCK_OPEN, pos)
        marker = line.find(LINE_COMMENT, pos)
        if marker != -1 and (opener == -1 or marker < opener):
            _add_span(spans, pos, marker)
            break
        if opener == -1:
            _add_span(spans, pos, len(line))
            break
        _add_span(spans, pos, opener)
        pos = opener + len(BLOCK_OPEN)
        state = True

    if line.lstrip().startswith(LINE_COMMENT):
        spans = []
    return LineScan(live=tuple(spans), in_block_comment=state)


def mask(line: str, spans: Sequence[Span]) -> str:
    """Blank out everything outside ``spans``, keeping column positions."""
    chars = [" "] * len(line)
    for start, end in spans:
        chars[start:end] = line[start:end]
    return "".join(chars)


def iter_live_lines(lines: Sequence[str]) -> Iterator[Tuple[int, str]]:
    """Yield ``(line_index, masked_line)`` for every line with live code."""
    state = False
    for index, line in enumerate(lines):
        scan = update(line, state)
        state = scan.in_block_comment
        if scan.live:
            yield index, mask(line, scan.live)


__all__ = [
    "BLOCK_CLOSE",
    "BLOCK_OPEN",
    "LINE_COMMENT",
    "LineScan",
    "iter_live_lines",
    "mask",
    "update",
]
