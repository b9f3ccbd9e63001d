"""ui.helpers — Shared drawing utilities for scenes."""

from __future__ import annotations
import pygame


def draw_title_bar(
    surface: pygame.Surface, app,
    x: int, y: int, w: int, text: str,
) -> None:
    """Draw a 34 px title bar across a panel."""
    pygame.draw.rect(surface, (50, 50, 75), (x, y, w, 34))
    app.draw_text(surface, text, x + 12, y + 6,
                  (200, 200, 255), font=app.font_lg)


def draw_swatch(surface: pygame.Surface, x: int, y: int,
                color: tuple, size: int = 28) -> pygame.Rect:
    """Small coloured square standing in for a report icon."""
    rect = pygame.Rect(x, y, size, size)
    pygame.draw.rect(surface, color, rect, border_radius=3)
    pygame.draw.rect(surface, (20, 20, 20), rect, 1, border_radius=3)
    return rect


def draw_separator(surface: pygame.Surface, x: int, y: int, w: int) -> None:
    pygame.draw.line(surface, (70, 70, 90), (x, y), (x + w, y))


def draw_status_footer(surface: pygame.Surface, app, entry: dict | None,
                       hint: str = "") -> None:
    """Newest status message on the left, key hint on the right."""
    sw, sh = surface.get_size()
    pygame.draw.rect(surface, (30, 30, 40), (0, sh - 28, sw, 28))
    if entry:
        color = (255, 120, 120) if entry["error"] else (140, 220, 160)
        app.draw_text(surface, entry["msg"], 10, sh - 22, color, font=app.font_sm)
    if hint:
        img = app.font_sm.render(hint, True, (110, 110, 140))
        surface.blit(img, (sw - img.get_width() - 10, sh - 22))
