"""Obstacle spawner, fired by the randomized spawn timer."""

from __future__ import annotations

import random
from typing import Any, Optional

from endless_runner.config import (
    OBSTACLE_START,
    OBSTACLE_SIZE,
    SPAWN_DELAY_MIN_MS,
    SPAWN_DELAY_MAX_MS,
)
from endless_runner.world.obstacle_hit import ObstacleHit
from endless_runner.world.physics import ArcadePhysics, Body, BodyGroup
from endless_runner.world.run_state import RunState


def random_spawn_delay(rng: Optional[random.Random] = None) -> int:
    """Milliseconds until the next obstacle, inclusive on both ends."""
    r = rng or random
    return r.randint(SPAWN_DELAY_MIN_MS, SPAWN_DELAY_MAX_MS)


class ObstacleSpawner:
    def __init__(
        self,
        physics: ArcadePhysics,
        obstacles: BodyGroup,
        player: Body,
        state: RunState,
        audio: Any,
    ) -> None:
        self.physics = physics
        self.obstacles = obstacles
        self.player = player
        self.state = state
        self.audio = audio

    def spawn(self) -> Body:
        x, y = OBSTACLE_START
        obstacle = self.obstacles.create(x, y, "obstacle", OBSTACLE_SIZE)
        # Snapshot: later speed-ups only affect obstacles spawned after them
        obstacle.set_velocity_x(self.state.obstacle_speed)
        obstacle.out_of_bounds_kill = True
        self.physics.add_collider(
            self.player,
            obstacle,
            ObstacleHit(self.player, obstacle, self.state, self.physics, self.audio),
        )
        return obstacle


__all__ = ["ObstacleSpawner", "random_spawn_delay"]
