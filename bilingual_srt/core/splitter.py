"""Split engine: break one overlong subtitle line into two balanced lines.

WHY: Long single-line captions are hard to read, but a naive midpoint cut
lands inside words, parentheticals or right before a full stop. The engine
picks a break the way a human subtitler would: at a space if possible, then
after strong punctuation, then right before a new parenthetical, and only
as a last resort at the character midpoint.

HOW: The line (alignment tag removed) is measured in meaningful characters
(letters, digits, ideographs). Each priority tier proposes cut positions;
a cut survives only if it keeps both halves within the balance tolerance,
does not land inside a small bracket pair and does not leave the first line
ending on an opening bracket. Within a tier the most balanced cut wins (the
leftmost on ties); a lower tier is consulted only if the higher one yields
nothing. The chosen cut is then post-processed: punctuation that must not
start a line migrates back to the end of the first line.

RULES:
- Lines with meaningful count <= threshold are never split.
- Balance tolerance: absolute max(1, threshold / 2), relative 45% of the
  count; a cut is rejected only when it exceeds both.
- A cut with one side <= 2 meaningful characters and the other larger by
  >= 5 is rejected as near-degenerate. Empty halves are always rejected.
- Bracket pairs whose inner count <= threshold * bracket_factor are too
  small to cut through.
- A dialogue line (two or more speaker dashes) is split at the second dash
  before, and regardless of, any length-based logic.
- Both halves are returned trimmed and without the alignment tag; the
  caller re-attaches the tag to the first half only.
"""

import logging
from typing import Callable, Iterator, List, Optional

from .brackets import BracketMatcher
from .chars import (
    MUSIC_SYMBOLS,
    extract_alignment_tag,
    is_punctuation_only,
    markup_mask,
    meaningful_flags,
    strip_markup,
)
from .models import SplitResult

logger = logging.getLogger(__name__)

SPACES = frozenset(" \u3000")

# Split right after these (closing brackets/quotes are added per line).
BREAK_AFTER_PUNCTUATION = frozenset("?!？！、，。:：;；—")

# Never allowed to start the second line (closing brackets/quotes added per line).
FORBIDDEN_LINE_OPENERS = frozenset(",.!?;:，。、！？；：…—～%％")

DIALOGUE_DASHES = frozenset("-－–")

ALLOWED_LEADING_TAGS = ("<i>", "{\\i1}")

RELATIVE_TOLERANCE = 0.45
DEGENERATE_SIDE = 2
DEGENERATE_EXCESS = 5


def split_dialogue(line: str) -> Optional[SplitResult]:
    """Split a two-speaker line at its second dialogue dash.

    A dash counts when it starts the line (ignoring leading markup) or
    directly follows whitespace. Returns None unless at least two such
    dashes exist and the text from the second one on has real content.
    """
    _tag, text = extract_alignment_tag(line)

    dashes = []  # type: List[int]
    for i, ch in enumerate(text):
        if ch not in DIALOGUE_DASHES:
            continue
        if (i > 0 and text[i - 1].isspace()) or not strip_markup(text[:i]).strip():
            dashes.append(i)
            if len(dashes) == 2:
                break

    if len(dashes) < 2:
        return None

    cut = dashes[1]
    left = text[:cut].strip()
    right = text[cut:].strip()
    if not right or is_punctuation_only(right):
        return None
    return SplitResult(left=left, right=right)


class _LineAnalysis:
    """Per-line lookup tables shared by every candidate check."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.mask = markup_mask(text)
        self.flags = meaningful_flags(text)
        self.prefix = [0]
        for flag in self.flags:
            self.prefix.append(self.prefix[-1] + (1 if flag else 0))
        self.total = self.prefix[-1]
        self.brackets = BracketMatcher(text, self.flags)

    def left_end(self, cut: int) -> int:
        """Index of the last non-space character before ``cut``, or -1."""
        return len(self.text[:cut].rstrip()) - 1

    def skip_spaces(self, pos: int) -> int:
        while pos < len(self.text) and self.text[pos].isspace():
            pos += 1
        return pos

    def is_forbidden_opener(self, pos: int) -> bool:
        if self.mask[pos]:
            return False
        return self.text[pos] in FORBIDDEN_LINE_OPENERS or self.brackets.is_closer(pos)

    def cut_is_safe(self, cut: int, bracket_limit: float) -> bool:
        """Bracket-smallness and opening-character guards for one cut."""
        if cut <= 0 or cut >= len(self.text):
            return False
        pair = self.brackets.innermost_enclosing_pair(cut)
        if pair is not None and pair.inner_meaningful <= bracket_limit:
            return False
        end = self.left_end(cut)
        if end >= 0 and self.brackets.is_opener(end):
            return False
        return True


def _space_cuts(line: _LineAnalysis) -> Iterator[int]:
    for i, ch in enumerate(line.text):
        if ch in SPACES and not line.mask[i]:
            yield i


def _punctuation_cuts(line: _LineAnalysis) -> Iterator[int]:
    for i, ch in enumerate(line.text):
        if line.mask[i]:
            continue
        if ch in BREAK_AFTER_PUNCTUATION or line.brackets.is_closer(i):
            yield i + 1


def _opening_bracket_cuts(line: _LineAnalysis) -> Iterator[int]:
    for i in range(len(line.text)):
        if line.brackets.is_opener(i):
            yield i


PRIORITY_TIERS = (
    ("space", _space_cuts),
    ("punctuation", _punctuation_cuts),
    ("opening bracket", _opening_bracket_cuts),
)


def is_balanced(left: int, right: int, threshold: int) -> bool:
    """Check a left/right meaningful-character split against the tolerances."""
    if left <= 0 or right <= 0:
        return False
    small, large = min(left, right), max(left, right)
    if small <= DEGENERATE_SIDE and large - small >= DEGENERATE_EXCESS:
        return False
    gap = large - small
    absolute = max(1, threshold / 2)
    relative = RELATIVE_TOLERANCE * (left + right)
    return not (gap > absolute and gap > relative)


def _best_cut(
    line: _LineAnalysis,
    cuts: Callable[[_LineAnalysis], Iterator[int]],
    threshold: int,
    bracket_limit: float,
) -> Optional[int]:
    best = None  # type: Optional[int]
    best_gap = 0
    for cut in cuts(line):
        if not line.cut_is_safe(cut, bracket_limit):
            continue
        left = line.prefix[cut]
        right = line.total - left
        if not is_balanced(left, right, threshold):
            continue
        gap = abs(left - right)
        if best is None or gap < best_gap:
            best, best_gap = cut, gap
    return best


def _midpoint_cut(line: _LineAnalysis) -> Optional[int]:
    """Cut after the middle meaningful character, one to the left if even."""
    wanted = (line.total - 1) // 2
    if wanted <= 0:
        return None
    for cut in range(1, len(line.text) + 1):
        if line.prefix[cut] == wanted and line.flags[cut - 1]:
            return cut
    return None


def _starts_with_allowed_leader(text: str) -> bool:
    if text[0] in DIALOGUE_DASHES or text[0] in MUSIC_SYMBOLS:
        return True
    lowered = text.lower()
    return any(lowered.startswith(tag) for tag in ALLOWED_LEADING_TAGS)


def _finish(line: _LineAnalysis, cut: int) -> Optional[SplitResult]:
    """Trim both halves and move forbidden line-openers back to the left."""
    text = line.text
    left = text[:cut].strip()
    start = line.skip_spaces(cut)
    right = text[start:].strip()

    if is_punctuation_only(right):
        return None
    if _starts_with_allowed_leader(right):
        return SplitResult(left=left, right=right)

    end = line.left_end(cut)
    while start < len(text) and line.is_forbidden_opener(start):
        left += text[start]
        end = start
        start = line.skip_spaces(start + 1)

    right = text[start:].strip()
    if not right:
        return None
    if end >= 0 and line.brackets.is_opener(end):
        return None
    return SplitResult(left=left, right=right)


def try_split(line: str, threshold: int, bracket_factor: float) -> Optional[SplitResult]:
    """Decide whether and where to break ``line`` into two lines.

    Args:
        line: One subtitle text line; a leading alignment tag is ignored.
        threshold: Meaningful-character count above which splitting is allowed.
        bracket_factor: Multiplier on threshold; bracket pairs enclosing at
            most ``threshold * bracket_factor`` meaningful characters are
            never cut through.

    Returns:
        The two trimmed halves (without the alignment tag), or None when
        the line is short enough or no acceptable break exists.
    """
    _tag, text = extract_alignment_tag(line)
    analysis = _LineAnalysis(text)
    if analysis.total <= threshold:
        return None

    bracket_limit = threshold * bracket_factor

    for tier_name, cuts in PRIORITY_TIERS:
        cut = _best_cut(analysis, cuts, threshold, bracket_limit)
        if cut is not None:
            logger.debug("Splitting at %s cut %d: %r", tier_name, cut, text)
            return _finish(analysis, cut)

    cut = _midpoint_cut(analysis)
    if cut is None or not analysis.cut_is_safe(cut, bracket_limit):
        logger.debug("No safe split point: %r", text)
        return None
    logger.debug("Splitting at midpoint cut %d: %r", cut, text)
    return _finish(analysis, cut)
