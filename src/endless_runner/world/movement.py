"""Keys -> player velocity. Evaluated once per frame while the run is live."""

from __future__ import annotations

from endless_runner.config import PLAYER_RUN_SPEED, JUMP_VELOCITY
from endless_runner.controls.keyboard import KeyState
from endless_runner.core.entity import Entity
from endless_runner.world.run_state import RunState


def apply_movement(player: Entity, keys: KeyState, state: RunState) -> None:
    """Set the player's velocity from held keys.

    Left wins over right; neither means standing still. A jump needs
    `state.can_jump`, which is spent immediately and only comes back on
    ground contact.
    """
    if keys.left:
        player.set_velocity_x(-PLAYER_RUN_SPEED)
    elif keys.right:
        player.set_velocity_x(PLAYER_RUN_SPEED)
    else:
        player.set_velocity_x(0)

    if keys.wants_jump and state.can_jump:
        player.set_velocity_y(JUMP_VELOCITY)
        state.can_jump = False


__all__ = ["apply_movement"]
