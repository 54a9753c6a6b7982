"""Minimal arcade physics: axis-aligned boxes, gravity and pairwise colliders.

Screen coordinates throughout (origin top-left, +y down). A `Body` position is
its box center. Each `ArcadePhysics.step(dt)`:

1. integrates gravity and velocity for every dynamic body,
2. runs colliders in registration order (separating dynamic bodies out of
   immovable ones, then invoking the callback),
3. clamps bodies flagged `collide_world_bounds` to the world rectangle,
4. destroys bodies flagged `out_of_bounds_kill` once fully outside the world.

`pause()` freezes all of the above; nothing resumes it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple, Union

from pygame.math import Vector2

from endless_runner.config import WIDTH, HEIGHT, GRAVITY_Y


def hex_to_rgb(value: int) -> Tuple[int, int, int]:
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


@dataclass(eq=False)
class Body:
    position: Vector2
    size: Tuple[float, float]
    texture_key: Optional[str] = None
    velocity: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))
    allow_gravity: bool = True
    immovable: bool = False
    collide_world_bounds: bool = False
    out_of_bounds_kill: bool = False
    visible: bool = True
    tint: Optional[Tuple[int, int, int]] = None
    alive: bool = True

    def __post_init__(self) -> None:
        self.position = Vector2(self.position)
        self.velocity = Vector2(self.velocity)

    # Convenience accessors ------------------------------------------------
    @property
    def x(self) -> float:
        return self.position.x

    @x.setter
    def x(self, value: float) -> None:
        self.position.x = float(value)

    @property
    def y(self) -> float:
        return self.position.y

    @y.setter
    def y(self, value: float) -> None:
        self.position.y = float(value)

    @property
    def half_size(self) -> Tuple[float, float]:
        return self.size[0] * 0.5, self.size[1] * 0.5

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """(left, top, right, bottom)"""
        hw, hh = self.half_size
        return (
            self.position.x - hw,
            self.position.y - hh,
            self.position.x + hw,
            self.position.y + hh,
        )

    def set_velocity_x(self, vx: float) -> None:
        self.velocity.x = float(vx)

    def set_velocity_y(self, vy: float) -> None:
        self.velocity.y = float(vy)

    def set_tint(self, rgb: int) -> None:
        self.tint = hex_to_rgb(rgb)

    def destroy(self) -> None:
        self.alive = False


class BodyGroup:
    """Unordered set of dynamic bodies sharing collider rules."""

    def __init__(self, world: "ArcadePhysics") -> None:
        self._world = world
        self._members: List[Body] = []

    def create(
        self, x: float, y: float, texture_key: Optional[str], size: Tuple[float, float]
    ) -> Body:
        body = self._world.add_sprite(x, y, texture_key, size)
        self._members.append(body)
        return body

    def children(self) -> List[Body]:
        return [b for b in self._members if b.alive]

    def prune(self) -> None:
        self._members = [b for b in self._members if b.alive]

    def __contains__(self, body: object) -> bool:
        return body in self._members

    def __iter__(self):
        return iter(self.children())

    def __len__(self) -> int:
        return len(self.children())


Target = Union[Body, BodyGroup]
CollideFn = Callable[[Body, Body], None]


def _members(target: Target) -> List[Body]:
    if isinstance(target, BodyGroup):
        return target.children()
    return [target] if target.alive else []


def overlaps(a: Body, b: Body) -> bool:
    """Horizontal overlap must be positive; vertical edge contact counts."""
    al, at, ar, ab = a.bounds
    bl, bt, br, bb = b.bounds
    return al < br and ar > bl and at <= bb and ab >= bt


def separate(dynamic: Body, solid: Body) -> None:
    """Push `dynamic` out of `solid` along the axis of least penetration."""
    dl, dt, dr, db = dynamic.bounds
    sl, st, sr, sb = solid.bounds
    ox = min(dr, sr) - max(dl, sl)
    oy = min(db, sb) - max(dt, st)
    hw, hh = dynamic.half_size
    if oy <= ox:
        if dynamic.y <= solid.y:
            dynamic.y = st - hh
            if dynamic.velocity.y > 0:
                dynamic.velocity.y = 0.0
        else:
            dynamic.y = sb + hh
            if dynamic.velocity.y < 0:
                dynamic.velocity.y = 0.0
    else:
        if dynamic.x <= solid.x:
            dynamic.x = sl - hw
            if dynamic.velocity.x > 0:
                dynamic.velocity.x = 0.0
        else:
            dynamic.x = sr + hw
            if dynamic.velocity.x < 0:
                dynamic.velocity.x = 0.0


@dataclass(eq=False)
class Collider:
    first: Target
    second: Target
    callback: Optional[CollideFn] = None

    @property
    def stale(self) -> bool:
        """A collider bound to a destroyed body can never fire again."""
        return any(
            isinstance(t, Body) and not t.alive for t in (self.first, self.second)
        )

    def process(self) -> int:
        hits = 0
        for a in _members(self.first):
            for b in _members(self.second):
                if a is b or not (a.alive and b.alive):
                    continue
                if not overlaps(a, b):
                    continue
                if b.immovable and not a.immovable:
                    separate(a, b)
                elif a.immovable and not b.immovable:
                    separate(b, a)
                hits += 1
                if self.callback is not None:
                    self.callback(a, b)
        return hits


class ArcadePhysics:
    def __init__(
        self,
        width: float = WIDTH,
        height: float = HEIGHT,
        gravity_y: float = GRAVITY_Y,
    ) -> None:
        self.width = float(width)
        self.height = float(height)
        self.gravity = Vector2(0.0, float(gravity_y))
        self.bodies: List[Body] = []
        self.groups: List[BodyGroup] = []
        self.colliders: List[Collider] = []
        self.paused = False

    # Factories -----------------------------------------------------------
    def add_sprite(
        self, x: float, y: float, texture_key: Optional[str], size: Tuple[float, float]
    ) -> Body:
        body = Body(position=Vector2(x, y), size=size, texture_key=texture_key)
        self.bodies.append(body)
        return body

    def add_static(
        self, x: float, y: float, texture_key: Optional[str], size: Tuple[float, float]
    ) -> Body:
        body = Body(
            position=Vector2(x, y),
            size=size,
            texture_key=texture_key,
            allow_gravity=False,
            immovable=True,
        )
        self.bodies.append(body)
        return body

    def add_group(self) -> BodyGroup:
        group = BodyGroup(self)
        self.groups.append(group)
        return group

    def add_collider(
        self, first: Target, second: Target, callback: Optional[CollideFn] = None
    ) -> Collider:
        collider = Collider(first, second, callback)
        self.colliders.append(collider)
        return collider

    def pause(self) -> None:
        self.paused = True

    # Simulation ------------------------------------------------------------
    def fully_outside(self, body: Body) -> bool:
        left, top, right, bottom = body.bounds
        return right <= 0 or left >= self.width or bottom <= 0 or top >= self.height

    def _clamp_to_world(self, body: Body) -> None:
        left, top, right, bottom = body.bounds
        hw, hh = body.half_size
        if left < 0:
            body.x = hw
            body.velocity.x = max(0.0, body.velocity.x)
        elif right > self.width:
            body.x = self.width - hw
            body.velocity.x = min(0.0, body.velocity.x)
        if top < 0:
            body.y = hh
            body.velocity.y = max(0.0, body.velocity.y)
        elif bottom > self.height:
            body.y = self.height - hh
            body.velocity.y = min(0.0, body.velocity.y)

    def _active(self) -> Iterable[Body]:
        return [b for b in self.bodies if b.alive and not b.immovable]

    def step(self, dt: float) -> None:
        if self.paused or dt <= 0:
            return

        for body in self._active():
            if body.allow_gravity:
                body.velocity += self.gravity * dt
            body.position += body.velocity * dt

        for collider in list(self.colliders):
            # A handler may pause the world mid-step
            if self.paused:
                break
            if not collider.stale:
                collider.process()

        for body in self._active():
            if body.collide_world_bounds:
                self._clamp_to_world(body)
            if body.out_of_bounds_kill and self.fully_outside(body):
                body.destroy()

        self.bodies = [b for b in self.bodies if b.alive]
        for group in self.groups:
            group.prune()
        self.colliders = [c for c in self.colliders if not c.stale]


__all__ = [
    "ArcadePhysics",
    "Body",
    "BodyGroup",
    "Collider",
    "hex_to_rgb",
    "overlaps",
    "separate",
]
