"""World package: run logic and the physics it runs on.

Re-exports the GL-free pieces so callers (and tests) can write

    from endless_runner.world import RunController, RunState

`RunScene` needs a GL context and is imported from `world.runscene` directly.
"""

from .physics import ArcadePhysics, Body, BodyGroup, Collider
from .run_state import RunState
from .movement import apply_movement
from .obstacle_hit import ObstacleHit, end_run
from .spawner import ObstacleSpawner, random_spawn_delay
from .difficulty import DifficultyEscalator
from .backdrop import TileBackdrop
from .run_hud import RunHUD, ScoreLabel
from .run_controller import RunController

__all__ = [
    "ArcadePhysics",
    "Body",
    "BodyGroup",
    "Collider",
    "RunState",
    "apply_movement",
    "ObstacleHit",
    "end_run",
    "ObstacleSpawner",
    "random_spawn_delay",
    "DifficultyEscalator",
    "TileBackdrop",
    "RunHUD",
    "ScoreLabel",
    "RunController",
]
