"""
core/scene.py — Scene interface

Each screen of the app (report conversion, leveling) is a Scene held on
the App's stack.  Only the top scene receives events and draw calls.
Scenes own no domain state: they read and write ``app.session``.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    title = ""

    def on_enter(self, app: App):
        """Called when this scene becomes active (pushed or revealed)."""

    def on_exit(self, app: App):
        """Called when this scene is removed or covered."""

    def handle_event(self, event: pygame.event.Event, app: App):
        pass

    def update(self, dt: float, app: App):
        pass

    def draw(self, surface: pygame.Surface, app: App):
        pass
