"""Exception types raised by bilingual_srt.

WHY: Callers (CLI, tests, other tools) need to tell a structurally invalid
subtitle file apart from a bad tuning preset without parsing messages.

RULES:
- Everything raised on purpose derives from SubtitleError.
- Both concrete errors are also ValueErrors, matching how the caption
  library reports bad input.
- Local malformations inside a file are never raised; they pass through.
"""


class SubtitleError(Exception):
    """Base class for all bilingual_srt errors."""


class InvalidSubtitleStreamError(SubtitleError, ValueError):
    """The input never contained a confirmed cue (index line + timecode line)."""


class PresetError(SubtitleError, ValueError):
    """Unknown preset or mode name, or tuning values that fail validation."""
