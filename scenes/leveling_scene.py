"""scenes/leveling_scene.py — Character level and experience-to-level.

Name, level and current experience edit the session's Character in
place.  The desired level is scene-local and only read when Calculate
is pressed; calculation errors show in the result line and the footer.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import pygame
from core.errors import AppError, InvalidValue
from logic.leveling import experience_to_reach, parse_int
from scenes.base import FormScene
from ui.commands import CalculateLevel, SaveCharacter, SwitchScene, UICommand
from ui.helpers import draw_separator
from ui.widgets import Button, TextField

if TYPE_CHECKING:
    from core.app import App


FIELD_X = 230


class LevelingScene(FormScene):
    title = "Leveling"
    other = "reports"

    def __init__(self):
        super().__init__()
        self.name_field = TextField((FIELD_X, 60, 240, 30), "Name")
        self.level_field = TextField((FIELD_X, 104, 100, 30), "Level", mode="int", max_len=4)
        self.exp_field = TextField((FIELD_X, 148, 160, 30), "Current EXP", max_len=12)
        self.desired_field = TextField((FIELD_X, 192, 100, 30), "Desired level", mode="int", max_len=4)
        self.fields = [self.name_field, self.level_field, self.exp_field, self.desired_field]
        self.buttons = [
            Button((20, 250, 130, 32), "Calculate", CalculateLevel()),
            Button((160, 250, 110, 32), "Save", SaveCharacter()),
            Button((400, 250, 150, 32), "< Reports", SwitchScene("reports")),
        ]
        self.result: str = ""
        self.result_is_error = False

    def on_enter(self, app: App):
        ch = app.session.character
        self.name_field.text = ch.name or ""
        self.level_field.text = str(ch.level)
        self.exp_field.text = ch.current_exp

    def on_field_changed(self, fld: TextField, app: App) -> None:
        ch = app.session.character
        if fld is self.name_field:
            ch.name = fld.text or None
        elif fld is self.level_field:
            try:
                ch.level = parse_int(fld.text, minimum=1)
            except InvalidValue:
                pass        # keep the last valid level until the field parses
        elif fld is self.exp_field:
            ch.current_exp = fld.text

    def apply(self, command: UICommand, app: App) -> None:
        session = app.session
        if isinstance(command, CalculateLevel):
            self.calculate(app)
        elif isinstance(command, SaveCharacter):
            session.save_character()
        else:
            super().apply(command, app)

    def calculate(self, app: App) -> None:
        session = app.session
        desired = self.desired_field.text
        try:
            needed = experience_to_reach(session.character, session.exp_table, desired)
        except AppError as ex:
            self.result = str(ex)
            self.result_is_error = True
            session.status.record("calc", str(ex), error=True)
            return
        except IndexError:
            self.result = f"Level table only goes up to {session.exp_table.max_level}"
            self.result_is_error = True
            session.status.record("calc", self.result, error=True)
            return
        self.result = f"EXP needed for level {desired.strip()}: {needed}"
        self.result_is_error = False
        session.status.record("calc", self.result)

    def draw_body(self, surface: pygame.Surface, app: App) -> None:
        if not self.result:
            return
        draw_separator(surface, 20, 300, surface.get_width() - 40)
        color = (255, 120, 120) if self.result_is_error else (230, 230, 160)
        app.draw_text(surface, self.result, 20, 316, color)
