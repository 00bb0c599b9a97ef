"""Line classifier: does a subtitle line count as target-language content?

WHY: Swap and Filter both hinge on one question per line: is this the
Chinese line or the English one? Looking for ideographs alone is not
enough. Decorative lines (``♪ ♪``, ``<i>——</i>``) are non-ASCII but carry
no words, while a line of corner brackets around a borrowed Latin word
(``「OK」``) is clearly target-language text.

HOW: A short decision chain over the character classifier:
  1. no character outside printable ASCII -> not target-language
  2. any target-script punctuation          -> target-language
  3. only markup, punctuation or notes      -> not target-language
  4. otherwise                              -> target-language

RULES:
- Callers pass the line with its alignment tag already removed.
- The check order matters; target punctuation wins over "decorative only".
"""

from .chars import has_non_ascii, has_target_punctuation, is_style_or_music_only


def is_target_language_line(line: str) -> bool:
    """Return True if ``line`` should be treated as target-language content."""
    if not has_non_ascii(line):
        return False
    if has_target_punctuation(line):
        return True
    if is_style_or_music_only(line):
        return False
    return True
