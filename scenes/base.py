"""scenes/base.py — Shared plumbing for the form-style scenes.

A ``FormScene`` holds a list of text fields and buttons.  Mouse clicks
focus fields or fire button commands, Tab cycles focus, and every
command goes through ``apply(command, app)``.  Subclasses implement
``apply`` and ``on_field_changed``; neither needs a display, which is
what the tests rely on.
"""

from __future__ import annotations
import importlib
from typing import TYPE_CHECKING

import pygame
from core.scene import Scene
from ui.commands import SwitchScene, UICommand
from ui.helpers import draw_status_footer, draw_title_bar
from ui.widgets import Button, TextField

if TYPE_CHECKING:
    from core.app import App


# name → (module, class) for SwitchScene
SCENES = {
    "reports":  ("scenes.reports_scene",  "ReportsScene"),
    "leveling": ("scenes.leveling_scene", "LevelingScene"),
}

FOOTER_HINT = "Tab = next field   F2 = switch screen   Esc = quit"


class FormScene(Scene):
    title = ""
    other = ""          # scene F2 switches to

    def __init__(self):
        self.fields: list[TextField] = []
        self.buttons: list[Button] = []

    # ── input ────────────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event, app: App):
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                app.running = False
                return
            if event.key == pygame.K_F2 and self.other:
                self.apply(SwitchScene(self.other), app)
                return
            if event.key == pygame.K_TAB:
                self.focus_next()
                return

        for fld in self.fields:
            if fld.handle_event(event):
                self.on_field_changed(fld, app)

        for button in self.buttons:
            command = button.handle_event(event)
            if command is not None:
                self.apply(command, app)

    def focus_next(self) -> None:
        if not self.fields:
            return
        current = next((i for i, f in enumerate(self.fields) if f.focused), -1)
        for f in self.fields:
            f.focused = False
        self.fields[(current + 1) % len(self.fields)].focused = True

    def on_field_changed(self, fld: TextField, app: App) -> None:
        pass

    def apply(self, command: UICommand, app: App) -> None:
        if isinstance(command, SwitchScene):
            self.switch(app, command.target)

    def switch(self, app: App, target: str) -> None:
        module_path, class_name = SCENES[target]
        cls = getattr(importlib.import_module(module_path), class_name)
        app.replace_scene(cls())

    # ── drawing ──────────────────────────────────────────────────────

    def draw(self, surface: pygame.Surface, app: App):
        surface.fill((16, 18, 24))
        sw, _ = surface.get_size()
        draw_title_bar(surface, app, 0, 0, sw, self.title)
        self.draw_body(surface, app)
        for fld in self.fields:
            app.draw_text(surface, fld.label, fld.rect.x - 170, fld.rect.y + 5,
                          (180, 180, 200))
            fld.draw(surface, app)
        for button in self.buttons:
            button.draw(surface, app)
        draw_status_footer(surface, app, app.session.status.latest, FOOTER_HINT)

    def draw_body(self, surface: pygame.Surface, app: App) -> None:
        pass
