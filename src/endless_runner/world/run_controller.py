"""Run loop controller: builds the world once, then advances it every frame.

The controller owns the RunState and the entities; the physics world and
timer scheduler are the engine side and are stepped by whoever hosts the
controller (RunScene in the game, the tests directly).

Frame order used by the host:

    timers.advance(dt_ms)   # may spawn obstacles / speed them up
    physics.step(dt)        # may flip can_jump or end the run
    controller.update()     # scroll, input, score, ground clamp
"""

from __future__ import annotations

import random
from typing import Any, Callable, List, Optional

from endless_runner.config import (
    PLAYER_START,
    PLAYER_SIZE,
    BARRIER_CENTER,
    BARRIER_SIZE,
    BACKGROUND_RECT,
    FOREGROUND_RECT,
    BACKGROUND_SCROLL,
    FOREGROUND_SCROLL,
    GROUND_Y,
    SPEED_UP_INTERVAL_MS,
)
from endless_runner.controls.keyboard import KeyState, poll_keyboard
from endless_runner.core.timers import TimerScheduler
from endless_runner.sound.sound_utils import Sounds
from endless_runner.world.backdrop import TileBackdrop
from endless_runner.world.difficulty import DifficultyEscalator
from endless_runner.world.movement import apply_movement
from endless_runner.world.physics import ArcadePhysics, Body, BodyGroup
from endless_runner.world.run_hud import RunHUD
from endless_runner.world.run_state import RunState
from endless_runner.world.spawner import ObstacleSpawner, random_spawn_delay


class RunController:
    def __init__(
        self,
        physics: Optional[ArcadePhysics] = None,
        timers: Optional[TimerScheduler] = None,
        *,
        keys: Callable[[], KeyState] = poll_keyboard,
        audio: Any = Sounds,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.physics = physics or ArcadePhysics()
        self.timers = timers or TimerScheduler()
        self.keys = keys
        self.audio = audio
        self.rng = rng or random.Random()
        self.state = RunState()
        self.created = False

        self.player: Optional[Body] = None
        self.barrier: Optional[Body] = None
        self.obstacles: Optional[BodyGroup] = None
        self.backdrops: List[TileBackdrop] = []
        self.hud: Optional[RunHUD] = None
        self.spawner: Optional[ObstacleSpawner] = None
        self.escalator: Optional[DifficultyEscalator] = None

    # ------------------------------------------------------------------
    def next_spawn_delay(self) -> int:
        return random_spawn_delay(self.rng)

    def create(self) -> None:
        """Build the run. Must be called once, before the first update()."""
        if self.created:
            raise RuntimeError("run already created")
        self.created = True
        physics = self.physics

        self.backdrops = [
            TileBackdrop(*BACKGROUND_RECT, "background", BACKGROUND_SCROLL),
            TileBackdrop(*FOREGROUND_RECT, "foreground", FOREGROUND_SCROLL),
        ]

        self.player = physics.add_sprite(*PLAYER_START, "player", PLAYER_SIZE)
        self.player.collide_world_bounds = True

        self.barrier = physics.add_static(*BARRIER_CENTER, "foreground", BARRIER_SIZE)
        self.barrier.visible = False

        self.obstacles = physics.add_group()
        self.spawner = ObstacleSpawner(
            physics, self.obstacles, self.player, self.state, self.audio
        )
        self.timers.add_event(self.next_spawn_delay, self.spawner.spawn, loop=True)

        self.hud = RunHUD()

        physics.add_collider(self.player, self.barrier, self._on_ground)
        physics.add_collider(self.obstacles, self.barrier)

        self.escalator = DifficultyEscalator(self.state)
        self.timers.add_event(SPEED_UP_INTERVAL_MS, self.escalator, loop=True)

    def _on_ground(self, player: Body, barrier: Body) -> None:
        # Only way can_jump comes back
        self.state.can_jump = True

    # ------------------------------------------------------------------
    def update(self) -> None:
        state = self.state
        if not state.is_game_over:
            for backdrop in self.backdrops:
                backdrop.scroll()
            apply_movement(self.player, self.keys(), state)
            state.score += 1
            self.hud.set_score(state.score)

        # Applied every frame, game over or not
        if self.player.y > GROUND_Y:
            self.player.y = GROUND_Y
        for obstacle in self.obstacles.children():
            if obstacle.y > GROUND_Y:
                obstacle.y = GROUND_Y

    # Convenience for hosts -------------------------------------------------
    @property
    def background(self) -> TileBackdrop:
        return self.backdrops[0]

    @property
    def foreground(self) -> TileBackdrop:
        return self.backdrops[1]

    def visible_bodies(self) -> List[Body]:
        bodies = [self.player] if self.player is not None else []
        if self.obstacles is not None:
            bodies.extend(self.obstacles.children())
        return [b for b in bodies if b.visible]


__all__ = ["RunController"]
