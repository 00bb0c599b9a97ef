"""Shared test fixtures for the bilingual_srt test suite.

WHY: Reader, policy, pipeline and CLI tests all need the same small
bilingual SRT documents. Centralizing them here keeps the expected
outputs in one place.

HOW: Module-level constants hold the raw documents; fixtures hand them
out and provide a cue factory.

RULES:
- Documents use LF endings; tests that need CRLF convert explicitly.
- Timecodes are arbitrary but always well-formed.
"""

from typing import List

import pytest

from bilingual_srt.core.models import Cue

TIMECODE = "00:01:20,000 --> 00:01:23,000"

BILINGUAL_SRT = (
    "15\n"
    "00:01:20,000 --> 00:01:23,000\n"
    "看来我错了\n"
    "My mistake.\n"
    "\n"
    "16\n"
    "00:01:24,000 --> 00:01:26,500\n"
    "{\\an8}你好\n"
    "Hello\n"
    "\n"
    "17\n"
    "00:01:27,000 --> 00:01:29,000\n"
    "Just English here\n"
)

SWAPPED_SRT = (
    "15\n"
    "00:01:20,000 --> 00:01:23,000\n"
    "My mistake.\n"
    "看来我错了\n"
    "\n"
    "16\n"
    "00:01:24,000 --> 00:01:26,500\n"
    "{\\an8}Hello\n"
    "你好\n"
    "\n"
    "17\n"
    "00:01:27,000 --> 00:01:29,000\n"
    "Just English here\n"
)

NO_CUES_TEXT = "This is not a subtitle file.\n42\nJust some text.\n"


def _make_cue(lines: List[str], index: str = "1", timecode: str = TIMECODE) -> Cue:
    return Cue(index=index, timecode=timecode, lines=list(lines))


@pytest.fixture
def make_cue():
    """Factory for cues with a default index and timecode."""
    return _make_cue


@pytest.fixture
def bilingual_srt():
    return BILINGUAL_SRT


@pytest.fixture
def swapped_srt():
    return SWAPPED_SRT


@pytest.fixture
def no_cues_text():
    return NO_CUES_TEXT
