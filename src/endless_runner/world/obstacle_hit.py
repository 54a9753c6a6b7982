"""Player x obstacle contact: the one-way RUNNING -> GAME_OVER transition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from endless_runner.config import GAME_OVER_TINT
from endless_runner.core.entity import Entity
from endless_runner.world.physics import ArcadePhysics, Body
from endless_runner.world.run_state import RunState

GAME_OVER_SOUND = "gameover"


def end_run(state: RunState, physics: ArcadePhysics, player: Entity, audio: Any) -> None:
    physics.pause()
    player.set_tint(GAME_OVER_TINT)
    audio.play(GAME_OVER_SOUND)
    state.is_game_over = True
    print(f"[Run] Game over. Final score: {state.score}")


@dataclass(eq=False)
class ObstacleHit:
    """Collision handler bound to exactly one player/obstacle pair.

    Holding the pair explicitly (instead of closing over spawner locals)
    keeps every registered handler tied to the obstacle it was made for.
    """

    player: Body
    obstacle: Body
    state: RunState
    physics: ArcadePhysics
    audio: Any

    def __call__(self, a: Body, b: Body) -> None:
        if {id(a), id(b)} != {id(self.player), id(self.obstacle)}:
            return
        end_run(self.state, self.physics, self.player, self.audio)


__all__ = ["ObstacleHit", "end_run", "GAME_OVER_SOUND"]
