"""ui — Widgets, command objects and drawing helpers for the scenes.

Buttons emit ``UICommand`` objects instead of mutating state; the active
scene applies them to the session.
"""

from ui.commands import (
    CalculateLevel, ClearConversion, ConvertReports, SaveCharacter,
    SaveReports, SwitchScene, UICommand,
)
from ui.widgets import Button, TextField

__all__ = [
    "Button", "TextField",
    "CalculateLevel", "ClearConversion", "ConvertReports", "SaveCharacter",
    "SaveReports", "SwitchScene", "UICommand",
]
