from __future__ import annotations

from endless_runner.config import OBSTACLE_SPEED_STEP
from endless_runner.world.run_state import RunState


class DifficultyEscalator:
    """Makes future obstacles faster each time the speed-up timer fires.

    Not gated on game over and not floored: after N firings the speed is
    `start - step * N`.
    """

    def __init__(self, state: RunState, step: int = OBSTACLE_SPEED_STEP) -> None:
        self.state = state
        self.step = step
        self.firings = 0

    def __call__(self) -> None:
        self.state.obstacle_speed -= self.step
        self.firings += 1


__all__ = ["DifficultyEscalator"]
