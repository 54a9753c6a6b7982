from __future__ import annotations

from dataclasses import dataclass

from endless_runner.config import OBSTACLE_START_SPEED


@dataclass
class RunState:
    """Everything the run mutates, owned by one controller on one thread.

    `obstacle_speed` is signed (negative = leftward) and only ever decreases.
    `is_game_over` never goes back to False.
    """

    score: int = 0
    is_game_over: bool = False
    obstacle_speed: int = OBSTACLE_START_SPEED
    can_jump: bool = True


__all__ = ["RunState"]
