"""Reflow policy: break overlong single-line cues into two lines.

WHY: Machine-made subtitles often put a whole sentence on one line. Long
lines are hard to read, but only single-line cues can be reflowed without
second-guessing a human's existing line breaks.

HOW: The alignment tag is set aside, a two-speaker dialogue line is split
at its second dash, and otherwise the split engine looks for a balanced
break. If neither finds one the cue is returned unchanged.

RULES:
- Only cues with exactly one body line are touched.
- The alignment tag is re-attached to the first output line only.
- threshold must be a positive integer, bracket_factor non-negative.
"""

from typing import Optional

from bilingual_srt.config import DEFAULT_BRACKET_FACTOR, DEFAULT_THRESHOLD
from bilingual_srt.core.chars import extract_alignment_tag
from bilingual_srt.core.models import Cue
from bilingual_srt.core.splitter import split_dialogue, try_split
from bilingual_srt.errors import PresetError
from bilingual_srt.policies.base import BasePolicy


class ReflowPolicy(BasePolicy):
    """Split single-line cues that exceed the length threshold.

    Args:
        threshold: Meaningful-character count above which a line is split.
        bracket_factor: Brackets enclosing at most threshold * bracket_factor
            meaningful characters are never split inside.
    """

    def __init__(
        self,
        threshold: int = DEFAULT_THRESHOLD,
        bracket_factor: float = DEFAULT_BRACKET_FACTOR,
    ) -> None:
        if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold <= 0:
            raise PresetError("threshold must be a positive integer, got {!r}".format(threshold))
        if bracket_factor < 0:
            raise PresetError("bracket_factor must not be negative, got {!r}".format(bracket_factor))
        self.threshold = threshold
        self.bracket_factor = float(bracket_factor)

    @property
    def name(self) -> str:
        return "Reflow"

    def apply(self, cue: Cue) -> Optional[Cue]:
        if len(cue.lines) != 1:
            return cue

        tag, text = extract_alignment_tag(cue.lines[0])
        result = split_dialogue(text)
        if result is None:
            result = try_split(text, self.threshold, self.bracket_factor)
        if result is None:
            return cue
        return cue.with_lines(result.as_lines(tag))
