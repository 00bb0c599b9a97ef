"""Pipeline driver: Reader -> Policy -> Writer over one subtitle stream.

WHY: Every transformation mode runs the same single pass. Centralizing it
keeps the "no output unless the file had at least one real cue" guarantee
in exactly one place, no matter which policy or front end is used.

HOW: Items flow from CueReader one at a time. Cues go through the policy;
pass-through lines are written unchanged. Lines seen before the first
confirmed cue are held back, and flushed the moment a cue is confirmed,
whether or not the policy keeps that cue. If the stream ends without one,
InvalidSubtitleStreamError is raised and nothing has been written to the
sink. Blank lines wait until the next written item so a dropped cue can
take its separator with it.

RULES:
- Output order equals input order; only Filter renumbers or drops cues.
- When a policy drops a cue, the blank separator that followed it is
  dropped too so no double blank lines appear. If nothing is written
  after a dropped cue, the blank lines before it are dropped instead.
- The validity check happens once, after the whole input is consumed.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List

from bilingual_srt.errors import InvalidSubtitleStreamError

from .models import Cue, Item
from .reader import CueReader, is_blank
from .writer import SrtWriter

if TYPE_CHECKING:
    from bilingual_srt.policies.base import BasePolicy

logger = logging.getLogger(__name__)


@dataclass
class TransformStats:
    """Counters for one run, reported by the CLI."""
    cues_read: int = 0
    cues_written: int = 0
    cues_dropped: int = 0
    cues_changed: int = 0


def _write_items(writer: SrtWriter, items: List[Item], newline: str) -> None:
    for item in items:
        writer.write_item(item, newline)


def transform_stream(lines: Iterable[str], policy: BasePolicy, sink) -> TransformStats:
    """Run ``policy`` over every cue of ``lines`` and write the result to ``sink``.

    Args:
        lines: Raw input lines, with or without terminators.
        policy: The transformation to apply to each cue.
        sink: Any object with a ``write(str)`` method.

    Returns:
        Counters describing what happened to the cues.

    Raises:
        InvalidSubtitleStreamError: If no cue was confirmed in the input.
    """
    reader = CueReader(lines)
    writer = SrtWriter(sink)
    stats = TransformStats()
    held = []  # type: List[Item]
    blanks = []  # type: List[Item]
    blanks_before_drop = []  # type: List[Item]
    skip_separator = False

    for item in reader:
        if not reader.valid:
            held.append(item)
            continue
        if held:
            while held and is_blank(held[-1].text):
                blanks.insert(0, held.pop())
            _write_items(writer, held, reader.newline)
            held = []

        if isinstance(item, Cue):
            result = policy.apply(item)
            if result is None:
                stats.cues_dropped += 1
                blanks_before_drop.extend(blanks)
                blanks = []
                skip_separator = True
                continue
            if result != item:
                stats.cues_changed += 1
            stats.cues_written += 1
            item = result
        elif is_blank(item.text):
            if skip_separator:
                skip_separator = False
            else:
                blanks.append(item)
            continue

        skip_separator = False
        _write_items(writer, blanks_before_drop + blanks + [item], reader.newline)
        blanks_before_drop = []
        blanks = []

    if not reader.valid:
        raise InvalidSubtitleStreamError(
            "No subtitle cues found (expected an index line followed by a timecode line)"
        )

    # blanks_before_drop only led up to dropped cues at the end; discard them.
    _write_items(writer, blanks, reader.newline)
    writer.close(reader.final_newline, reader.newline)
    stats.cues_read = reader.cues_read
    logger.info(
        "%s: %d cues read, %d written, %d changed, %d dropped",
        policy.name, stats.cues_read, stats.cues_written,
        stats.cues_changed, stats.cues_dropped,
    )
    return stats


def transform_lines(lines: Iterable[str], policy: BasePolicy) -> str:
    """Run ``policy`` over ``lines`` and return the output as one string."""
    buffer = io.StringIO()
    transform_stream(lines, policy, buffer)
    return buffer.getvalue()


def split_keepends(text: str) -> List[str]:
    """Split ``text`` after each line feed only, keeping the terminators.

    Unlike ``str.splitlines``, U+2028 and other Unicode separators stay
    inside their line.
    """
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def transform_text(text: str, policy: BasePolicy) -> str:
    """Run ``policy`` over a whole SRT document held in memory."""
    return transform_lines(split_keepends(text), policy)
