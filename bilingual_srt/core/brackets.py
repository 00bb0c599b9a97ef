"""Bracket matcher: find well-nested delimiter pairs in a single text line.

WHY: The split engine must not cut a short parenthetical or quotation in
half ("他说（真的）不行" should never break inside the parentheses). That
needs to know which delimiters actually pair up, and how much text each
pair encloses.

HOW: One left-to-right scan with an explicit stack of (delimiter, position)
entries. A fixed table maps every closing delimiter to its opener; plain
quote marks, which open and close with the same character, toggle: the
first occurrence opens, the next one closes while its opener is on top of
the stack. Each successful close records a BracketPair with the number of
meaningful characters strictly inside it.

RULES:
- Pairs are always properly nested (stack discipline, no recursion).
- An unmatched opener or closer never produces a pair.
- A closer whose opener is buried under other openers pops down to it; the
  openers above are discarded as unmatched. A closer with no opener on the
  stack at all is ignored.
- Characters inside markup (``<i>``, ``{\\an8}`` ...) are not delimiters.
- An apostrophe between two letters/digits ("don't") is not a quote.
"""

from typing import Dict, List, Optional, Set, Tuple

from .chars import markup_mask, meaningful_flags
from .models import BracketPair

CLOSE_TO_OPEN: Dict[str, str] = {
    ")": "(",
    "]": "[",
    "}": "{",
    "）": "（",
    "］": "［",
    "｝": "｛",
    "」": "「",
    "』": "『",
    "】": "【",
    "》": "《",
    "〉": "〈",
    "〕": "〔",
    "〗": "〖",
    "”": "“",
    "’": "‘",
}

OPEN_TO_CLOSE: Dict[str, str] = {v: k for k, v in CLOSE_TO_OPEN.items()}

# Same character opens and closes.
TOGGLE_QUOTES = frozenset("\"'＂＇")

OPENERS = frozenset(OPEN_TO_CLOSE)
CLOSERS = frozenset(CLOSE_TO_OPEN)

_APOSTROPHES = frozenset("'’")


def is_apostrophe(text: str, pos: int) -> bool:
    """True if the quote mark at ``pos`` sits inside a word, as in "it's"."""
    if text[pos] not in _APOSTROPHES:
        return False
    if pos == 0 or pos == len(text) - 1:
        return False
    return text[pos - 1].isalnum() and text[pos + 1].isalnum()


class BracketMatcher:
    """Paired-delimiter index for one line of text.

    Args:
        text: The line to scan (alignment tag already removed).
        flags: Optional precomputed meaningful-character flags for ``text``.

    Attributes:
        pairs: Matched pairs, in the order their closers were seen.
    """

    def __init__(self, text: str, flags: Optional[List[bool]] = None) -> None:
        self.text = text
        if flags is None:
            flags = meaningful_flags(text)
        self._prefix = [0]
        for flag in flags:
            self._prefix.append(self._prefix[-1] + (1 if flag else 0))

        self.pairs: List[BracketPair] = []
        self._opened: Set[int] = set()
        self._closed: Set[int] = set()
        self._scan(markup_mask(text))

    def _scan(self, mask: List[bool]) -> None:
        stack: List[Tuple[str, int]] = []
        text = self.text

        for pos, ch in enumerate(text):
            if mask[pos]:
                continue

            if ch in TOGGLE_QUOTES:
                if is_apostrophe(text, pos):
                    continue
                if stack and stack[-1][0] == ch:
                    self._record(stack.pop()[1], pos)
                else:
                    stack.append((ch, pos))
                    self._opened.add(pos)

            elif ch in OPENERS:
                stack.append((ch, pos))
                self._opened.add(pos)

            elif ch in CLOSERS:
                if is_apostrophe(text, pos):
                    continue
                opener = CLOSE_TO_OPEN[ch]
                for depth in range(len(stack) - 1, -1, -1):
                    if stack[depth][0] == opener:
                        left = stack[depth][1]
                        del stack[depth:]
                        self._record(left, pos)
                        break

    def _record(self, left: int, right: int) -> None:
        inner = self._prefix[right] - self._prefix[left + 1]
        self.pairs.append(BracketPair(left=left, right=right, inner_meaningful=inner))
        self._closed.add(right)

    def is_opener(self, pos: int) -> bool:
        """True if the character at ``pos`` opened a bracket or quote."""
        return pos in self._opened

    def is_closer(self, pos: int) -> bool:
        """True if the character at ``pos`` is a closing bracket or quote.

        Matched closers always qualify; a stray closing bracket still counts
        as one unless it is really an apostrophe.
        """
        if pos in self._closed:
            return True
        return self.text[pos] in CLOSERS and not is_apostrophe(self.text, pos)

    def innermost_enclosing_pair(self, pos: int) -> Optional[BracketPair]:
        """Return the smallest pair strictly containing cut position ``pos``.

        ``pos`` is a cut between ``text[pos - 1]`` and ``text[pos]``. A cut
        right before an opener or right after a closer is outside that pair.
        """
        best = None  # type: Optional[BracketPair]
        for pair in self.pairs:
            if pair.left < pos <= pair.right:
                if best is None or pair.span < best.span:
                    best = pair
        return best
