from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List

UpdateFn = Callable[[float], None]


@dataclass
class Scene:
    """Base scene: runs its updaters in order each frame.

    Subclasses append to `updaters` and override `render()`; the engine only
    talks to this surface.
    """

    updaters: List[UpdateFn] = field(default_factory=list)

    def update(self, dt: float) -> None:
        for fn in self.updaters:
            fn(dt)

    # Optional per-event handler (scenes can override)
    def handle_event(self, event) -> None:
        pass

    def render(self, *, text=None) -> None:  # pragma: no cover - visual
        pass

    def log_timing(self, message: str, start_time: float, end_time: float, log: bool = False) -> None:
        """Print how long a setup phase took, when asked to."""
        if log:
            print(f"{message} took {end_time - start_time:.6f} seconds")
