"""Character classifier: script detection, punctuation and markup helpers.

WHY: Both the line classifier (is this line Chinese?) and the split engine
(how long is this line, where may it break?) reason about single characters
rather than words. Keeping those predicates in one stateless module means
the two consumers always agree on what a "meaningful" character is.

HOW: Plain functions over a character or a short string. Inline markup
(``<i>``, ``<font ...>``, ``{\\an8}`` and other override blocks) is located
with one regex; a boolean mask marks markup characters so they can be
skipped when counting and never chosen as break positions.

RULES:
- Printable ASCII is U+0020 (space) through U+007E (tilde), inclusive.
- A meaningful character is a letter, digit or CJK ideograph. Punctuation,
  symbols, whitespace and markup never count toward any length.
- An empty string is not ASCII and is punctuation-only.
- Nothing here holds state; every function is pure.
"""

import re
import unicodedata
from typing import List, Tuple

# Full-width / CJK punctuation that only appears in target-script text.
TARGET_PUNCTUATION = frozenset(
    "（）［］｛｝"   # full-width parentheses, brackets, braces
    "、。，；：？！"  # ideographic comma / full stop, full-width marks
    "「」『』"        # corner brackets
    "《》〈〉"        # angle brackets
    "【】〔〕〖〗"    # lenticular and tortoise-shell brackets
    "〜～・"          # wave dash, full-width tilde, middle dot
)

MUSIC_SYMBOLS = frozenset("♪♫♬♩♭♮♯")

# Style tags and {\...} override blocks (alignment tags included).
MARKUP_RE = re.compile(
    r"</?[ibus]>|<font\b[^>]*>|</font>|\\?\{\\[^{}]*\}",
    re.IGNORECASE,
)

ALIGNMENT_TAG_RE = re.compile(r"^\\?\{\\an\d+\}")

_CJK_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x3400, 0x4DBF),    # CJK Unified Ideographs Extension A
    (0x4E00, 0x9FFF),    # CJK Unified Ideographs
    (0xF900, 0xFAFF),    # CJK Compatibility Ideographs
    (0x20000, 0x2FA1F),  # Extensions B-F and compatibility supplement
    (0x3040, 0x30FF),    # Hiragana, Katakana
    (0xAC00, 0xD7AF),    # Hangul syllables
)


def is_printable_ascii(ch: str) -> bool:
    return " " <= ch <= "~"


def is_ascii(line: str) -> bool:
    """True iff the line is non-empty and entirely printable ASCII."""
    return bool(line) and all(is_printable_ascii(ch) for ch in line)


def has_non_ascii(line: str) -> bool:
    """True iff any character falls outside the printable ASCII band."""
    return any(not is_printable_ascii(ch) for ch in line)


def is_cjk(ch: str) -> bool:
    """True if ``ch`` is a CJK ideograph, kana or hangul syllable."""
    code = ord(ch)
    for low, high in _CJK_RANGES:
        if low <= code <= high:
            return True
    return False


def is_meaningful(ch: str) -> bool:
    """True for letters, digits and CJK ideographs."""
    return ch.isalnum() or is_cjk(ch)


def has_target_punctuation(line: str) -> bool:
    return any(ch in TARGET_PUNCTUATION for ch in line)


def extract_alignment_tag(line: str) -> Tuple[str, str]:
    """Split a leading ``{\\anN}`` tag off a line.

    Returns:
        ``(tag, rest)``; ``tag`` is ``""`` when the line has none.
    """
    match = ALIGNMENT_TAG_RE.match(line)
    if not match:
        return "", line
    return match.group(0), line[match.end():]


def has_alignment_tag(line: str) -> bool:
    return ALIGNMENT_TAG_RE.match(line) is not None


def strip_markup(text: str) -> str:
    """Remove style tags and override blocks from ``text``."""
    return MARKUP_RE.sub("", text)


def markup_mask(text: str) -> List[bool]:
    """Return a per-character mask that is True inside markup."""
    mask = [False] * len(text)
    for match in MARKUP_RE.finditer(text):
        for i in range(match.start(), match.end()):
            mask[i] = True
    return mask


def meaningful_flags(text: str) -> List[bool]:
    """Per-character flags: True where the character counts toward length."""
    mask = markup_mask(text)
    return [is_meaningful(ch) and not masked for ch, masked in zip(text, mask)]


def meaningful_count(text: str) -> int:
    return sum(meaningful_flags(text))


def is_punctuation_only(text: str) -> bool:
    """True if ``text`` has no meaningful character outside markup.

    Whitespace, punctuation, symbols and markup all count as "punctuation"
    here, so an empty or blank string is punctuation-only as well.
    """
    return not any(meaningful_flags(text))


def is_decoration(ch: str) -> bool:
    """Whitespace, punctuation or a musical note; never content."""
    if ch.isspace() or ch in MUSIC_SYMBOLS or ch in TARGET_PUNCTUATION:
        return True
    if is_printable_ascii(ch):
        return not ch.isalnum()
    return unicodedata.category(ch).startswith("P")


def is_style_or_music_only(line: str) -> bool:
    """True if nothing remains once markup, punctuation and notes are removed.

    Catches lines such as ``<i>♪ ♪</i>`` or ``{\\an8}——`` that carry no
    words of their own. Other symbols (emoji, stars, arrows) are kept, so
    a line made of them is content.
    """
    return all(is_decoration(ch) for ch in strip_markup(line))
