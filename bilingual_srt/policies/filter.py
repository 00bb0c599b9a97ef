"""Filter policy: keep only the target-language lines of every cue.

WHY: Turning a bilingual file into a Chinese-only one means dropping the
English lines, dropping cues that had no Chinese at all, and renumbering
what is left so players do not trip over gaps.

HOW: Each body line is classified (alignment tag ignored). Surviving lines
keep their relative order. A cue with no surviving line is dropped; every
other cue gets the next sequence number, starting at 1.

RULES:
- Numbering is 1..K over surviving cues, independent of original indices.
- An alignment tag on a dropped line moves to the next surviving line of
  the same cue that has no tag of its own; tags are never duplicated.
- Empty cues are kept (and numbered); there is nothing to filter.
- Numbering state lives on the instance; use one instance per file.
"""

from typing import List, Optional

from bilingual_srt.core.chars import extract_alignment_tag
from bilingual_srt.core.language import is_target_language_line
from bilingual_srt.core.models import Cue
from bilingual_srt.policies.base import BasePolicy


class FilterPolicy(BasePolicy):
    """Drop non-target-language lines and renumber the surviving cues."""

    def __init__(self) -> None:
        self._next_index = 1

    @property
    def name(self) -> str:
        return "Filter"

    def _number(self, cue: Cue) -> Cue:
        numbered = cue.renumbered(self._next_index)
        self._next_index += 1
        return numbered

    def apply(self, cue: Cue) -> Optional[Cue]:
        if not cue.lines:
            return self._number(cue)

        kept = []  # type: List[str]
        pending_tag = ""
        for line in cue.lines:
            tag, text = extract_alignment_tag(line)
            if not is_target_language_line(text):
                if tag and not pending_tag:
                    pending_tag = tag
                continue
            if pending_tag and not tag:
                line = pending_tag + line
                pending_tag = ""
            kept.append(line)

        if not kept:
            return None
        return self._number(cue.with_lines(kept))
