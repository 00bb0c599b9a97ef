"""Tuning presets for the reflow policy.

WHY: Chinese subtitles and Latin-script subtitles need very different
length thresholds because an ideograph carries far more than a letter.
Named presets let users pick a sensible pair of values without knowing
the details, and a small JSON file can carry a show-specific tuning.

HOW: Each preset is a plain dict with ``threshold`` and
``bracket_factor``. PRESETS maps names to those dicts. Preset files are
JSON objects validated with jsonschema against PRESET_SCHEMA; the
environment defaults from config fill in whatever a file leaves out.

RULES:
- Presets are constants; resolve_preset() always returns a copy.
- threshold is an integer >= 1, bracket_factor a number >= 0.
- Every failure surfaces as PresetError.
"""

import copy
import json
from pathlib import Path
from typing import Dict, Union

import jsonschema

from bilingual_srt.config import DEFAULT_BRACKET_FACTOR, DEFAULT_THRESHOLD
from bilingual_srt.errors import PresetError

# Chinese / Japanese text: 20 ideographs is about one comfortable line
PRESET_CJK: Dict = {
    "threshold": 20,
    "bracket_factor": 0.5,
}

# Latin-script text: spaces and punctuation are not counted
PRESET_LATIN: Dict = {
    "threshold": 36,
    "bracket_factor": 0.5,
}

# Vertical / mobile video with narrow lines
PRESET_TIGHT: Dict = {
    "threshold": 14,
    "bracket_factor": 0.4,
}

PRESETS: Dict[str, Dict] = {
    "cjk": PRESET_CJK,
    "latin": PRESET_LATIN,
    "tight": PRESET_TIGHT,
}

PRESET_SCHEMA: Dict = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "threshold": {"type": "integer", "minimum": 1},
        "bracket_factor": {"type": "number", "minimum": 0},
    },
    "additionalProperties": False,
}


def default_tuning() -> Dict:
    """Tuning taken from the environment (see config)."""
    return {
        "threshold": DEFAULT_THRESHOLD,
        "bracket_factor": DEFAULT_BRACKET_FACTOR,
    }


def resolve_preset(name: str) -> Dict:
    """Return a copy of the preset called ``name``.

    Raises:
        PresetError: If no such preset exists.
    """
    key = name.lower()
    if key not in PRESETS:
        raise PresetError(
            "Unknown preset '{}'. Available: {}".format(name, ", ".join(PRESETS))
        )
    return copy.deepcopy(PRESETS[key])


def validate_tuning(data: Dict) -> Dict:
    """Validate a tuning dict against PRESET_SCHEMA and fill in defaults."""
    try:
        jsonschema.validate(instance=data, schema=PRESET_SCHEMA)
    except jsonschema.ValidationError as e:
        raise PresetError("Invalid preset: {}".format(e.message)) from e
    tuning = default_tuning()
    tuning.update(data)
    tuning["threshold"] = int(tuning["threshold"])
    tuning["bracket_factor"] = float(tuning["bracket_factor"])
    return tuning


def load_preset_file(path: Union[str, Path]) -> Dict:
    """Load and validate a JSON preset file.

    Args:
        path: File containing e.g. ``{"threshold": 18, "bracket_factor": 0.6}``.

    Returns:
        A complete tuning dict.

    Raises:
        PresetError: If the file cannot be read, is not JSON, or fails validation.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise PresetError("Cannot read preset file {}: {}".format(path, e)) from e
    except json.JSONDecodeError as e:
        raise PresetError("Preset file {} is not valid JSON: {}".format(path, e)) from e
    return validate_tuning(data)
