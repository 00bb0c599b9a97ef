"""Writer: serialize cues and pass-through lines back to SRT text.

WHY: The transformed file must diff cleanly against the input, so the
writer reproduces line terminators exactly rather than normalizing them.

HOW: Terminators are written *between* lines using the newline style in
force at that moment, and one final terminator is added only if the input
itself ended with one. An unchanged file therefore round-trips byte for
byte, and a file that switches to CRLF part way through keeps CRLF from
that point on.

RULES:
- Cue layout: index line, timecode line, body lines (no blank line; the
  blank separator is a RawLine of its own).
- The sink only needs a ``write(str)`` method.
"""

from typing import Any, List

from .models import Cue, Item


def render_item(item: Item) -> List[str]:
    """Return the output lines for one reader item, without terminators."""
    if isinstance(item, Cue):
        return [item.index, item.timecode] + list(item.lines)
    return [item.text]


class SrtWriter:
    """Streams rendered lines to a text sink."""

    def __init__(self, sink: Any) -> None:
        self._sink = sink
        self._started = False
        self.lines_written = 0

    def write_line(self, text: str, newline: str) -> None:
        if self._started:
            self._sink.write(newline)
        self._sink.write(text)
        self._started = True
        self.lines_written += 1

    def write_item(self, item: Item, newline: str) -> None:
        for line in render_item(item):
            self.write_line(line, newline)

    def close(self, final_newline: bool, newline: str) -> None:
        """Write the trailing terminator if the input had one."""
        if self._started and final_newline:
            self._sink.write(newline)
