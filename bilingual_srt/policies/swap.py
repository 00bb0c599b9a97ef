"""Swap policy: reorder the two lines of a bilingual cue.

WHY: Bilingual subtitle files come with the Chinese line on top or at the
bottom depending on who made them. Players and editors often want the
other order, and running the tool again should put it back.

HOW: Only cues with exactly two body lines are considered. The lines are
exchanged when one is target-language and the other pure ASCII, so
applying Swap twice restores the original. The alignment tag from the
first line always ends up in front of whichever line is first afterwards.

RULES:
- Cues with 0, 1 or more than 2 lines are returned untouched.
- An alignment tag on the second line is a structural error in the input;
  such cues are left unswapped.
- Two Chinese lines or two English lines are never swapped.
"""

import logging
from typing import Optional

from bilingual_srt.core.chars import extract_alignment_tag, has_alignment_tag, is_ascii
from bilingual_srt.core.language import is_target_language_line
from bilingual_srt.core.models import Cue
from bilingual_srt.policies.base import BasePolicy

logger = logging.getLogger(__name__)


class SwapPolicy(BasePolicy):
    """Exchange the target-language line and the ASCII line of a two-line cue."""

    @property
    def name(self) -> str:
        return "Swap"

    def apply(self, cue: Cue) -> Optional[Cue]:
        if len(cue.lines) != 2:
            return cue

        tag, first = extract_alignment_tag(cue.lines[0])
        second = cue.lines[1]
        if has_alignment_tag(second):
            logger.debug("Cue %s has an alignment tag on its second line; not swapping", cue.index)
            return cue

        target_first = is_target_language_line(first) and is_ascii(second)
        ascii_first = is_ascii(first) and is_target_language_line(second)
        if not (target_first or ascii_first):
            return cue

        return cue.with_lines([tag + second, first])
