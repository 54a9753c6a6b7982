from typing import Optional, Protocol, Tuple

from pygame.math import Vector2


class Entity(Protocol):
    """What the run logic needs from a world object.

    Physics bodies satisfy it; tests can hand in any object with these
    attributes instead.
    """

    position: Vector2
    velocity: Vector2
    tint: Optional[Tuple[int, int, int]]
    out_of_bounds_kill: bool
    alive: bool

    def set_velocity_x(self, vx: float) -> None: ...

    def set_velocity_y(self, vy: float) -> None: ...

    def set_tint(self, rgb: int) -> None: ...
