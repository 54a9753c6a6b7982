"""Run scene: hosts the RunController inside the engine loop.

Owns the engine-side collaborators (physics world, timer scheduler, sprite
renderer) and steps them in a fixed order every frame. Must be constructed
after the GL context exists since it loads textures.
"""

from __future__ import annotations

import time

from endless_runner.config import WIDTH, HEIGHT, CLEAR_COLOR
from endless_runner.core.scene import Scene
from endless_runner.core.timers import TimerScheduler
from endless_runner.render.sprite_renderer import SpriteRenderer
from endless_runner.sound.sound_utils import Sounds
from endless_runner.textures.resourcepath import SOUND_ASSETS
from endless_runner.textures.texture_manager import load_run_textures
from endless_runner.world.physics import ArcadePhysics
from endless_runner.world.run_controller import RunController

from OpenGL.GL import glClear, glClearColor, GL_COLOR_BUFFER_BIT


class RunScene(Scene):
    def __init__(self, *, log: bool = False) -> None:
        super().__init__()
        self._log = log

        self.physics = ArcadePhysics(WIDTH, HEIGHT)
        self.timers = TimerScheduler()
        self.controller = RunController(self.physics, self.timers, audio=Sounds)

        start_time = time.perf_counter()
        self._load_assets()
        self.log_timing("Loading assets", start_time, time.perf_counter(), self._log)

        start_time = time.perf_counter()
        self.controller.create()
        self.log_timing("Creating run", start_time, time.perf_counter(), self._log)

        # Clock, then physics, then run logic
        self.updaters.extend([self._advance_timers, self.physics.step, self._update_run])

    def _load_assets(self) -> None:
        self.textures = load_run_textures()
        self.sprites = SpriteRenderer(self.textures, WIDTH, HEIGHT)

        Sounds.ensure_init()
        loaded = Sounds.load_manifest(SOUND_ASSETS)
        if self._log:
            print(f"[Run] Loaded {loaded}/{len(SOUND_ASSETS)} sounds.")

    def _advance_timers(self, dt: float) -> None:
        self.timers.advance(dt * 1000.0)

    def _update_run(self, dt: float) -> None:
        self.controller.update()

    def render(self, *, text=None) -> None:  # pragma: no cover - visual
        glClearColor(*CLEAR_COLOR)
        glClear(GL_COLOR_BUFFER_BIT)

        self.sprites.begin()
        for backdrop in self.controller.backdrops:
            self.sprites.draw_backdrop(backdrop)
        self.sprites.draw_bodies(self.controller.visible_bodies())

        if text is not None:
            self.controller.hud.draw(text)
