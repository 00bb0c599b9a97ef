"""bilingual_srt: line-level transformations for bilingual SRT subtitles.

WHY: Fan-subbed and machine-translated subtitles often stack a Chinese
line and an English line in every cue. Viewers and editors need to flip
that order, strip one language, or break overlong single lines into two
readable ones, all without disturbing timing or any other byte of the file.

HOW: Three-stage pipeline. The cue reader (core.reader) parses raw lines
into Cue records, a policy (policies/) transforms each cue, and the writer
(core.writer) serializes the result with the input's line endings. The
character classifier, bracket matcher and split engine in core/ do the
text analysis.

RULES:
- transform_text() / transform_stream() are the public entry points.
- Output is complete or absent: a file without any cue raises
  InvalidSubtitleStreamError and produces nothing.
- Timecodes are validated but never modified.
"""

__version__ = "0.1.0"

from bilingual_srt.core.models import Cue, RawLine, SplitResult
from bilingual_srt.core.pipeline import TransformStats, transform_lines, transform_stream, transform_text
from bilingual_srt.errors import InvalidSubtitleStreamError, PresetError, SubtitleError
from bilingual_srt.policies import POLICIES, build_policy

__all__ = [
    "Cue",
    "RawLine",
    "SplitResult",
    "TransformStats",
    "transform_lines",
    "transform_stream",
    "transform_text",
    "InvalidSubtitleStreamError",
    "PresetError",
    "SubtitleError",
    "POLICIES",
    "build_policy",
]
