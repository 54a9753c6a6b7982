"""Core engine loop & orchestration.

- Engine: sets up the pygame/OpenGL window and drives the main loop.
- Scene: owns gameplay updates and rendering (RunScene for the game).

The run never ends on its own: game over freezes the scene and the window
stays up until it is closed or Escape is pressed.
"""

from __future__ import annotations

from typing import Optional

import pygame
from OpenGL.GL import glDisable, glClearColor, GL_DEPTH_TEST, GL_CULL_FACE

from endless_runner.config import (
    WIDTH,
    HEIGHT,
    FULLSCREEN,
    FPS,
    VSYNC,
    CAPTION,
    CLEAR_COLOR,
    MAX_FRAME_DT,
)
from endless_runner.ui.text_renderer import TextRenderer
from endless_runner.world.runscene import RunScene


class Engine:
    def __init__(self, *, log: bool = False):
        pygame.init()
        pygame.display.set_caption(CAPTION)
        flags = pygame.DOUBLEBUF | pygame.OPENGL
        if FULLSCREEN:
            flags |= pygame.FULLSCREEN
        try:
            pygame.display.set_mode((WIDTH, HEIGHT), flags, vsync=(1 if VSYNC else 0))
        except (TypeError, pygame.error):
            # Older pygame builds reject the vsync kwarg, or vsync is unavailable
            pygame.display.set_mode((WIDTH, HEIGHT), flags)
        self.clock = pygame.time.Clock()

        # Plain 2D: no depth, no culling
        glDisable(GL_DEPTH_TEST)
        glDisable(GL_CULL_FACE)
        glClearColor(*CLEAR_COLOR)

        self.scene = RunScene(log=log)
        self.text = TextRenderer(WIDTH, HEIGHT)
        self.frames = 0

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            self.scene.handle_event(event)
        return True

    # ------------------------------------------------------------------
    def update(self, dt: float) -> None:
        self.scene.update(min(dt, MAX_FRAME_DT))

    # ------------------------------------------------------------------
    def render(self) -> None:  # pragma: no cover - visual
        self.scene.render(text=self.text)
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self, max_frames: Optional[int] = None) -> None:  # pragma: no cover - visual
        running = True
        while running:
            dt = self.clock.tick(FPS) / 1000.0
            running = self.handle_events()
            if not running:
                break
            self.update(dt)
            self.render()
            self.frames += 1
            if max_frames is not None and self.frames >= max_frames:
                print(f"[Engine] Smoke run finished after {self.frames} frames.")
                break
        pygame.quit()
