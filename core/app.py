"""
core/app.py — Pygame application shell

Handles the window, main loop, and scene stack.  Domain state lives on
``app.session``; scenes read and mutate it from their event handlers.

    app = App(session, title="BA Reports", width=720, height=560)
    app.push_scene(ReportsScene())
    app.run()
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.session import Session


class App:
    def __init__(self, session: Session, title: str = "BA Reports",
                 width: int = 720, height: int = 560, fps: int = 30):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = fps
        self.dt = 0.0

        self.session = session

        # Scene stack; only the top scene is active
        self._scenes: list[Scene] = []

        self.font = pygame.font.SysFont("monospace", 16)
        self.font_sm = pygame.font.SysFont("monospace", 13)
        self.font_lg = pygame.font.SysFont("monospace", 22, bold=True)

    # -- Scene management --

    @property
    def scene(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    def push_scene(self, scene: Scene):
        if self._scenes:
            self._scenes[-1].on_exit(self)
        self._scenes.append(scene)
        scene.on_enter(self)

    def replace_scene(self, scene: Scene):
        """Swap the top scene without revealing the one below."""
        if self._scenes:
            self._scenes[-1].on_exit(self)
            self._scenes.pop()
        self._scenes.append(scene)
        scene.on_enter(self)

    # -- Main loop --

    def run(self):
        while self.running:
            self.dt = self.clock.tick(self.fps) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.VIDEORESIZE:
                    self.screen = pygame.display.set_mode(
                        (event.w, event.h), pygame.RESIZABLE)
                elif self.scene:
                    self.scene.handle_event(event, self)

            if self.scene:
                self.scene.update(self.dt, self)
                self.scene.draw(self.screen, self)

            pygame.display.flip()

        pygame.quit()

    # -- Convenience --

    def draw_text(self, surface: pygame.Surface, text: str, x: int, y: int,
                  color=(255, 255, 255), font=None):
        """Quick text draw. Returns the rect for layout chaining."""
        f = font or self.font
        img = f.render(text, True, color)
        return surface.blit(img, (x, y))
