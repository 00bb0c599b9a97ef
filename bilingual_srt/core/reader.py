"""Cue reader: a pull-based SRT parser with one line of lookahead.

WHY: Real subtitle files are messy. They have BOMs, Windows line endings,
numeric dialogue lines that look like cue indices, and stray text between
cues. The reader must turn any of that into a clean stream of Cue records
without losing a single byte of what it does not understand, because the
output has to diff cleanly against the input.

HOW: CueReader wraps any iterable of raw lines and is itself an iterator
yielding Cue and RawLine items. A line of digits is only a *candidate*
index; it becomes a cue when the next line is a well-formed timecode.
Otherwise the candidate and the line after it are both emitted verbatim
as pass-through text; that second line never starts a cue, even if it is
numeric itself. A confirmed cue collects body lines
up to the next blank line (emitted as a RawLine separator) or end of input.

RULES:
- A BOM on the very first line is stripped before anything else.
- Line terminators are removed from every line; if any line carries a
  carriage return, ``crlf`` becomes True for the rest of the run.
- ``valid`` is set the first time a cue is confirmed and never reset.
- ``final_newline`` records whether the last consumed line was terminated.
- Body length is unbounded; policies decide what to do with long cues.
- Nothing here raises on malformed input; it is passed through.
"""

import logging
import re
from collections import deque
from typing import Deque, Iterable, Iterator, List, Optional

from .models import Cue, Item, RawLine

logger = logging.getLogger(__name__)

BOM = "\ufeff"

INDEX_RE = re.compile(r"^\d+$")

TIMECODE_RE = re.compile(
    r"^\s*\d{2}:\d{2}:\d{2},\d{3}\s*-->\s*\d{2}:\d{2}:\d{2},\d{3}\s*$"
)


def is_index_line(line: str) -> bool:
    return INDEX_RE.match(line.strip()) is not None


def is_timecode_line(line: str) -> bool:
    return TIMECODE_RE.match(line) is not None


def is_blank(line: str) -> bool:
    return not line.strip()


class CueReader:
    """Iterator over the cues and pass-through lines of one SRT stream.

    Attributes:
        valid: True once at least one cue has been confirmed.
        crlf: True once any input line has carried a carriage return.
        final_newline: True if the last line read ended with a terminator.
        cues_read: Number of confirmed cues so far.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._source = iter(lines)
        self._pushed_back = None  # type: Optional[str]
        self._pending = deque()  # type: Deque[RawLine]
        self._first = True
        self.valid = False
        self.crlf = False
        self.final_newline = False
        self.cues_read = 0

    @property
    def newline(self) -> str:
        """The line terminator every output line should use right now."""
        return "\r\n" if self.crlf else "\n"

    def _next_line(self) -> Optional[str]:
        """Pull one line with its terminator removed, or None at end of input."""
        if self._pushed_back is not None:
            line, self._pushed_back = self._pushed_back, None
            return line

        raw = next(self._source, None)
        if raw is None:
            return None

        if self._first:
            self._first = False
            if raw.startswith(BOM):
                raw = raw[len(BOM):]

        self.final_newline = raw.endswith("\n")
        if self.final_newline:
            raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
            self.crlf = True
        return raw

    def _read_body(self) -> List[str]:
        body = []  # type: List[str]
        while True:
            line = self._next_line()
            if line is None:
                return body
            if is_blank(line):
                self._pushed_back = line
                return body
            body.append(line)

    def __iter__(self) -> Iterator[Item]:
        return self

    def __next__(self) -> Item:
        if self._pending:
            return self._pending.popleft()

        line = self._next_line()
        if line is None:
            raise StopIteration

        if not is_index_line(line):
            return RawLine(line)

        following = self._next_line()
        if following is None:
            return RawLine(line)
        if not is_timecode_line(following):
            logger.debug("Numeric line %r is not followed by a timecode", line)
            self._pending.append(RawLine(following))
            return RawLine(line)

        self.valid = True
        self.cues_read += 1
        return Cue(index=line, timecode=following, lines=self._read_body())
