from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass
class TileBackdrop:
    """Repeating textured strip whose texture slides left as it scrolls.

    `tile_position_x` is in texture pixels; the renderer wraps it by the
    texture width, so it can grow without bound.
    """

    center: Tuple[float, float]
    size: Tuple[float, float]
    texture_key: str
    scroll_rate: float
    tile_position_x: float = 0.0

    def scroll(self) -> None:
        self.tile_position_x += self.scroll_rate


__all__ = ["TileBackdrop"]
