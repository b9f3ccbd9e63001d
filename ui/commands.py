"""ui.commands — Command objects emitted by buttons.

Widgets never touch the session directly.  A button carries a command;
the scene reads it and applies the effect to ``app.session``.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class ConvertReports:
    """Run the report conversion and store the result."""


@dataclass(frozen=True, slots=True)
class ClearConversion:
    """Drop the stored conversion result."""


@dataclass(frozen=True, slots=True)
class SaveReports:
    pass


@dataclass(frozen=True, slots=True)
class SaveCharacter:
    pass


@dataclass(frozen=True, slots=True)
class CalculateLevel:
    """Compute the experience needed for the desired level field."""


@dataclass(frozen=True, slots=True)
class SwitchScene:
    """Replace the current scene with another registered one."""
    target: str


UICommand = Union[ConvertReports, ClearConversion, SaveReports,
                  SaveCharacter, CalculateLevel, SwitchScene]
