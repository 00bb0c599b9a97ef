"""Transformation policy registry.

WHY: The CLI and the pipeline look policies up by mode name. A central
dict makes adding a mode a one-line change.

HOW: POLICIES maps mode names to policy *classes*. build_policy() creates
a fresh instance for one run, passing tuning values only to the policies
that take them.

RULES:
- Keys are the CLI mode names.
- Always build a new instance per file (Filter numbers cues per instance).
"""

from __future__ import annotations

from typing import Dict, Optional, Type

from bilingual_srt.errors import PresetError
from bilingual_srt.policies.base import BasePolicy
from bilingual_srt.policies.filter import FilterPolicy
from bilingual_srt.policies.reflow import ReflowPolicy
from bilingual_srt.policies.swap import SwapPolicy

POLICIES: Dict[str, Type[BasePolicy]] = {
    "swap": SwapPolicy,
    "filter": FilterPolicy,
    "reflow": ReflowPolicy,
}


def build_policy(mode: str, tuning: Optional[dict] = None) -> BasePolicy:
    """Instantiate the policy registered under ``mode``.

    Args:
        mode: One of the POLICIES keys.
        tuning: Dict with ``threshold`` and ``bracket_factor``; used by Reflow.

    Raises:
        PresetError: If ``mode`` is unknown or the tuning values are invalid.
    """
    if mode not in POLICIES:
        raise PresetError(
            "Unknown mode '{}'. Available: {}".format(mode, ", ".join(POLICIES))
        )
    if mode == "reflow" and tuning is not None:
        return ReflowPolicy(
            threshold=tuning["threshold"],
            bracket_factor=tuning["bracket_factor"],
        )
    return POLICIES[mode]()
