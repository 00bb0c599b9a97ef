"""Data models for subtitle cues and line-splitting results.

WHY: Every stage of the pipeline (reader, policies, writer) passes cues
around. A small set of dataclasses keeps that contract explicit and makes
it impossible for a policy to quietly rewrite a cue another stage still
holds.

HOW: Cue holds the index line as written, the opaque timecode line and the
raw body lines. RawLine carries any line that is not part of a confirmed
cue (separators, stray text). BracketPair and SplitResult are ephemeral
values produced per text line by the bracket matcher and split engine.

RULES:
- Cue.index is the index line as written (string), never re-parsed.
- Cue.timecode is validated by the reader but never interpreted as time.
- Cue.lines may be empty; an empty cue is legal and round-trips unchanged.
- Cues are never mutated in place; use with_lines() / renumbered().
- The alignment tag stays inside lines[0]; policies extract and re-attach it.
"""

from dataclasses import dataclass, field, replace
from typing import List, Union


@dataclass
class Cue:
    """One timed caption unit.

    Attributes:
        index: Sequence number as written in the source (may be non-contiguous).
        timecode: The validated ``HH:MM:SS,mmm --> HH:MM:SS,mmm`` line, verbatim.
        lines: Body text lines, top line first, without line terminators.
    """
    index: str
    timecode: str
    lines: List[str] = field(default_factory=list)

    def with_lines(self, lines: List[str]) -> "Cue":
        """Return a copy of this cue with a new body."""
        return replace(self, lines=list(lines))

    def renumbered(self, index: int) -> "Cue":
        """Return a copy of this cue carrying a new sequence number."""
        return replace(self, index=str(index), lines=list(self.lines))


@dataclass
class RawLine:
    """A line emitted verbatim: blank separators and text outside any cue."""
    text: str


Item = Union[Cue, RawLine]


@dataclass(frozen=True)
class BracketPair:
    """A matched pair of delimiters within one text line.

    Attributes:
        left: Character index of the opening delimiter.
        right: Character index of the closing delimiter.
        inner_meaningful: Letters, digits and ideographs strictly between them.
    """
    left: int
    right: int
    inner_meaningful: int

    @property
    def span(self) -> int:
        return self.right - self.left


@dataclass(frozen=True)
class SplitResult:
    """Two trimmed halves of a line that the split engine accepted."""
    left: str
    right: str

    def as_lines(self, tag: str = "") -> List[str]:
        """Return both halves as body lines, with ``tag`` on the first."""
        return [tag + self.left, self.right]
