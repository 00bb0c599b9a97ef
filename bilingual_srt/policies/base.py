"""Abstract base policy.

WHY: Swap, Filter and Reflow all consume the same Cue records and the CLI
and pipeline drive them generically. This base class fixes that interface.

HOW: BasePolicy is an ABC with a ``name`` property and an ``apply()``
method that maps one Cue to a new Cue, or to None when the cue should be
dropped from the output.

RULES:
- ``apply()`` never mutates the cue it is given; it returns a new one, or
  the same object when nothing changes.
- Only Filter may return None.
- One policy instance serves one run; Filter numbers cues per instance.

To add a new transformation:
1. Create a new module in policies/
2. Subclass BasePolicy
3. Implement ``name`` and ``apply()``
4. Register it in POLICIES in policies/__init__.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from bilingual_srt.core.models import Cue


class BasePolicy(ABC):
    """Abstract base for all cue transformations."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable policy name, e.g. 'Swap'."""

    @abstractmethod
    def apply(self, cue: Cue) -> Optional[Cue]:
        """Transform one cue.

        Args:
            cue: A cue confirmed by the reader.

        Returns:
            The transformed cue, or None to drop it from the output.
        """
