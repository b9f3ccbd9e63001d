"""scenes/reports_scene.py — Report counts → purple-equivalent and EXP.

One numeric field per tier, then Convert / Clear / Save.  Up/Down on a
focused field steps it by ``[reports] step``; values are clamped to
``[0, max_quantity]``.  The conversion result stays on screen until
Clear, a fresh Convert, or the next app start.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import pygame
from core import settings
from core.constants import TIER_COLORS, TIER_COUNT, TIER_NAMES
from logic.conversion import apply_conversion, clear, conversion_lines, set_quantity
from scenes.base import FormScene
from ui.commands import ClearConversion, ConvertReports, SaveReports, SwitchScene, UICommand
from ui.helpers import draw_separator, draw_swatch
from ui.widgets import Button, TextField

if TYPE_CHECKING:
    from core.app import App


FIELD_X = 230
ROW_Y = 60
ROW_H = 44


def format_quantity(value: float) -> str:
    return str(int(value)) if value == int(value) else str(value)


class ReportsScene(FormScene):
    title = "Reports Amount"
    other = "leveling"

    def __init__(self):
        super().__init__()
        self.max_quantity = float(settings.get("reports", "max_quantity", 50000.0))
        self.step = float(settings.get("reports", "step", 10.0))
        self.fields = [
            TextField((FIELD_X, ROW_Y + i * ROW_H, 160, 30),
                      f"{TIER_NAMES[i]} Reports", mode="float", max_len=10)
            for i in range(TIER_COUNT)
        ]
        by = ROW_Y + TIER_COUNT * ROW_H + 10
        self.buttons = [
            Button((20, by, 110, 32), "Convert", ConvertReports()),
            Button((140, by, 110, 32), "Clear", ClearConversion()),
            Button((260, by, 110, 32), "Save", SaveReports()),
            Button((400, by, 150, 32), "Leveling >", SwitchScene("leveling")),
        ]

    def on_enter(self, app: App):
        self.sync_fields(app)

    def sync_fields(self, app: App) -> None:
        for fld, qty in zip(self.fields, app.session.reports.quantities):
            fld.text = format_quantity(qty)

    def handle_event(self, event: pygame.event.Event, app: App):
        if event.type == pygame.KEYDOWN and event.key in (pygame.K_UP, pygame.K_DOWN):
            delta = self.step if event.key == pygame.K_UP else -self.step
            for tier, fld in enumerate(self.fields):
                if fld.focused:
                    self.step_quantity(app, tier, delta)
            return
        super().handle_event(event, app)

    def step_quantity(self, app: App, tier: int, delta: float) -> None:
        reports = app.session.reports
        stored = set_quantity(reports, tier, reports.quantities[tier] + delta,
                              self.max_quantity)
        self.fields[tier].text = format_quantity(stored)

    def on_field_changed(self, fld: TextField, app: App) -> None:
        tier = self.fields.index(fld)
        try:
            value = float(fld.text) if fld.text not in ("", ".") else 0.0
        except ValueError:
            return
        stored = set_quantity(app.session.reports, tier, value, self.max_quantity)
        if stored != value:
            fld.text = format_quantity(stored)

    def apply(self, command: UICommand, app: App) -> None:
        session = app.session
        if isinstance(command, ConvertReports):
            result = apply_conversion(session.reports)
            session.status.record("convert", f"{result.purple_reports:.2f} purple reports")
        elif isinstance(command, ClearConversion):
            clear(session.reports)
            session.status.record("convert", "Cleared")
        elif isinstance(command, SaveReports):
            session.save_reports()
        else:
            super().apply(command, app)

    def draw_body(self, surface: pygame.Surface, app: App) -> None:
        for i in range(TIER_COUNT):
            draw_swatch(surface, 20, ROW_Y + i * ROW_H + 1, TIER_COLORS[i])

        result = app.session.reports.conversion
        if result is None:
            return
        y = ROW_Y + TIER_COUNT * ROW_H + 60
        draw_separator(surface, 20, y, surface.get_width() - 40)
        for line in conversion_lines(result):
            y += 28
            app.draw_text(surface, line, 20, y, (230, 230, 160))
