"""Configuration defaults and .env loading.

WHY: The reflow thresholds are tuned per show and per language, and people
who batch-process files want to set them once rather than on every
command line. Keeping every default in one module makes them easy to find
and override.

HOW: python-dotenv loads a .env file on import. Each default can be
overridden through an environment variable; the CLI flags override both.

RULES:
- DEFAULT_THRESHOLD is a meaningful-character count (letters, digits, ideographs).
- DEFAULT_BRACKET_FACTOR multiplies the threshold to size "small" brackets.
- Invalid numbers in the environment raise ValueError at import time.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the working directory (where the tool is run from)
load_dotenv()

DEFAULT_THRESHOLD = int(os.getenv("BILINGUAL_SRT_THRESHOLD", "20"))
DEFAULT_BRACKET_FACTOR = float(os.getenv("BILINGUAL_SRT_BRACKET_FACTOR", "0.5"))
OUTPUT_ENCODING = os.getenv("BILINGUAL_SRT_ENCODING", "utf-8")
"""Encoding for written files; input is always read as UTF-8."""
