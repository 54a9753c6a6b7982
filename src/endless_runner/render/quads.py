"""Vertex data for 2D textured quads.

Two triangles per quad, 7 floats per vertex: x, y, r, g, b, u, v. Screen
space has +y down; textures are uploaded row-flipped, so v=1 is the top of
the image.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

import numpy as np

FLOATS_PER_VERTEX = 7
WHITE = (1.0, 1.0, 1.0)


def tint_to_color(tint: Optional[Tuple[int, int, int]]) -> Tuple[float, float, float]:
    if tint is None:
        return WHITE
    r, g, b = tint
    return (r / 255.0, g / 255.0, b / 255.0)


def quad_vertices(
    center: Tuple[float, float],
    size: Tuple[float, float],
    *,
    color: Tuple[float, float, float] = WHITE,
    u0: float = 0.0,
    u1: float = 1.0,
    v_top: float = 1.0,
    v_bottom: float = 0.0,
) -> np.ndarray:
    cx, cy = center
    hw, hh = size[0] * 0.5, size[1] * 0.5
    left, right = cx - hw, cx + hw
    top, bottom = cy - hh, cy + hh
    r, g, b = color
    tl = (left, top, r, g, b, u0, v_top)
    tr = (right, top, r, g, b, u1, v_top)
    br = (right, bottom, r, g, b, u1, v_bottom)
    bl = (left, bottom, r, g, b, u0, v_bottom)
    return np.array([tl, tr, br, tl, br, bl], dtype=np.float32)


def tiled_uv(
    size: Tuple[float, float],
    texture_size: Tuple[int, int],
    tile_position_x: float,
) -> Tuple[float, float, float, float]:
    """UVs that repeat the texture at native pixel size, shifted by the scroll.

    Returns (u0, u1, v_top, v_bottom); the offset is wrapped into [0, 1).
    """
    tex_w, tex_h = texture_size
    tex_w = max(1, int(tex_w))
    tex_h = max(1, int(tex_h))
    offset = (float(tile_position_x) / tex_w) % 1.0
    u_span = float(size[0]) / tex_w
    v_span = float(size[1]) / tex_h
    return offset, offset + u_span, 1.0, 1.0 - v_span


def batch(quads: Iterable[np.ndarray]) -> np.ndarray:
    parts = [q for q in quads if q.size]
    if not parts:
        return np.zeros((0, FLOATS_PER_VERTEX), dtype=np.float32)
    return np.concatenate(parts, axis=0)


__all__ = ["FLOATS_PER_VERTEX", "batch", "quad_vertices", "tiled_uv", "tint_to_color"]
