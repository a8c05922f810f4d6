"""Line-oriented extraction of comment blocks from source text.

This is a heuristic, not a lexer.  Only lines whose trimmed content *starts*
with a comment marker are recognised:

* ``//`` starts a line-comment block that runs over consecutive ``//`` lines.
* ``/*`` (without a ``*/`` on the same line) starts a block comment that runs
  up to and including the first line that is exactly ``*/``.

Trailing comments after code, nested block comments and comment markers inside
string literals are not handled.
"""

from __future__ import annotations

import enum
import logging
from typing import Iterator, List, NamedTuple, Optional, Tuple

logger = logging.getLogger(__name__)

LINE_COMMENT = "//"
BLOCK_START = "/*"
BLOCK_END = "*/"

__all__ = [
    "CommentBlock",
    "CommentIterator",
    "FileState",
    "extract_comments",
    "split_lines",
]


class CommentBlock(NamedTuple):
    """A contiguous run of comment lines from one file."""

    starting_line: int  # 1-based
    text: str


class FileState(enum.Enum):
    """Parser state between two lines."""

    NO_COMMENT = "no comment"
    IN_LINE_COMMENT = "line comment"
    IN_BLOCK_COMMENT = "block comment"


def split_lines(text: str) -> List[str]:
    """Split *text* on newlines only, dropping a trailing carriage return.

    Unlike :meth:`str.splitlines`, form feeds and Unicode line separators do
    not start a new line, so line numbers count newline characters.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _join(lines: List[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


class CommentIterator:
    """Iterate over the :class:`CommentBlock` items found in *text*.

    Each step consumes lines until exactly one complete block is available.
    The line that terminates a line comment is not part of that comment; it is
    pushed back and examined again as a possible block start on the next step.
    Iterators are single-use: create a new one for every file.
    """

    def __init__(self, text: str, source: Optional[str] = None):
        self._lines: Iterator[Tuple[int, str]] = enumerate(split_lines(text), 1)
        self._pushed_back: Optional[Tuple[int, str]] = None
        self._source = source

    def __iter__(self) -> "CommentIterator":
        return self

    def _next_line(self) -> Optional[Tuple[int, str]]:
        if self._pushed_back is not None:
            item, self._pushed_back = self._pushed_back, None
            return item
        return next(self._lines, None)

    def __next__(self) -> CommentBlock:
        state = FileState.NO_COMMENT
        start = 0
        lines: List[str] = []

        while True:
            item = self._next_line()
            if item is None:
                break
            line_no, raw_line = item
            line = raw_line.strip()

            if state is FileState.NO_COMMENT:
                if line.startswith(LINE_COMMENT):
                    lines.append(line)
                    start = line_no
                    state = FileState.IN_LINE_COMMENT
                elif line.startswith(BLOCK_START) and BLOCK_END not in line:
                    lines.append(line)
                    start = line_no
                    state = FileState.IN_BLOCK_COMMENT

            elif state is FileState.IN_LINE_COMMENT:
                if not line.startswith(LINE_COMMENT):
                    self._pushed_back = item
                    return CommentBlock(start, _join(lines))
                lines.append(line)

            else:
                lines.append(line)
                if line == BLOCK_END:
                    return CommentBlock(start, _join(lines))

        if state is FileState.NO_COMMENT:
            raise StopIteration

        # Flush whatever was collected; the caller still gets the block.
        logger.warning(
            "%s: file ended inside a %s starting at line %d",
            self._source or "<input>",
            state.value,
            start,
        )
        return CommentBlock(start, _join(lines))


def extract_comments(text: str, source: Optional[str] = None) -> CommentIterator:
    """Return a fresh iterator over the comment blocks in *text*.

    *source* is only used to name the file in diagnostics.
    """
    return CommentIterator(text, source=source)
