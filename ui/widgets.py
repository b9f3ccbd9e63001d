"""ui.widgets — Buttons and single-line text fields.

Both widgets are plain objects with a ``pygame.Rect``; event handling
needs no display, so scenes can be driven headlessly in tests.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from ui.commands import UICommand


# Characters accepted by numeric fields
_DIGITS = set("0123456789")


class Button:
    __slots__ = ("rect", "label", "command", "hovered")

    def __init__(self, rect: pygame.Rect, label: str, command: UICommand):
        self.rect = pygame.Rect(rect)
        self.label = label
        self.command = command
        self.hovered = False

    def handle_event(self, event: pygame.event.Event) -> UICommand | None:
        """Return the button's command on a left click inside it."""
        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)
        elif (event.type == pygame.MOUSEBUTTONDOWN and event.button == 1
              and self.rect.collidepoint(event.pos)):
            return self.command
        return None

    def draw(self, surface: pygame.Surface, app) -> None:
        bg = (70, 70, 110) if self.hovered else (50, 50, 75)
        pygame.draw.rect(surface, bg, self.rect, border_radius=4)
        pygame.draw.rect(surface, (120, 120, 170), self.rect, 1, border_radius=4)
        img = app.font.render(self.label, True, (230, 230, 255))
        surface.blit(img, img.get_rect(center=self.rect.center))


class TextField:
    """Single-line input.

    ``mode`` is ``"text"`` (anything printable), ``"int"`` (digits only)
    or ``"float"`` (digits and one decimal point).  Validation of the
    value itself is left to the caller.
    """

    __slots__ = ("rect", "label", "text", "mode", "max_len", "focused")

    def __init__(self, rect: pygame.Rect, label: str, text: str = "",
                 mode: str = "text", max_len: int = 24):
        self.rect = pygame.Rect(rect)
        self.label = label
        self.text = text
        self.mode = mode
        self.max_len = max_len
        self.focused = False

    def accepts(self, ch: str) -> bool:
        if not ch or not ch.isprintable():
            return False
        if self.mode == "int":
            return ch in _DIGITS
        if self.mode == "float":
            return ch in _DIGITS or (ch == "." and "." not in self.text)
        return True

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Apply a key press.  Returns True if ``text`` changed."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.focused = self.rect.collidepoint(event.pos)
            return False
        if not self.focused or event.type != pygame.KEYDOWN:
            return False
        if event.key == pygame.K_BACKSPACE:
            if not self.text:
                return False
            self.text = self.text[:-1]
            return True
        ch = getattr(event, "unicode", "")
        if len(self.text) < self.max_len and self.accepts(ch):
            self.text += ch
            return True
        return False

    def draw(self, surface: pygame.Surface, app) -> None:
        border = (200, 200, 255) if self.focused else (90, 90, 120)
        pygame.draw.rect(surface, (24, 24, 34), self.rect)
        pygame.draw.rect(surface, border, self.rect, 1)
        shown = self.text + ("_" if self.focused else "")
        app.draw_text(surface, shown, self.rect.x + 6, self.rect.y + 5,
                      (230, 230, 230))
