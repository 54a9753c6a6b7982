"""Draws backdrops and physics bodies as textured quads.

Fixed-function pipeline with client-side vertex arrays built by
`render.quads`. Bodies sharing a texture are drawn in one call. Requires an
active GL context.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List

import numpy as np
from OpenGL.GL import (
    glMatrixMode,
    glLoadIdentity,
    glOrtho,
    glEnable,
    glDisable,
    glBlendFunc,
    glBindTexture,
    glTexEnvi,
    glEnableClientState,
    glDisableClientState,
    glVertexPointer,
    glColorPointer,
    glTexCoordPointer,
    glDrawArrays,
    GL_PROJECTION,
    GL_MODELVIEW,
    GL_TEXTURE_2D,
    GL_BLEND,
    GL_SRC_ALPHA,
    GL_ONE_MINUS_SRC_ALPHA,
    GL_TEXTURE_ENV,
    GL_TEXTURE_ENV_MODE,
    GL_MODULATE,
    GL_VERTEX_ARRAY,
    GL_COLOR_ARRAY,
    GL_TEXTURE_COORD_ARRAY,
    GL_FLOAT,
    GL_TRIANGLES,
)

from endless_runner.render.quads import batch, quad_vertices, tiled_uv, tint_to_color
from endless_runner.textures.texture_utils import ensure_texture_repeat, get_texture_size
from endless_runner.world.backdrop import TileBackdrop
from endless_runner.world.physics import Body


class SpriteRenderer:
    def __init__(self, textures: Dict[str, int], width: int, height: int) -> None:
        self.textures = textures
        self.width = width
        self.height = height

    def begin(self) -> None:  # pragma: no cover - visual
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, self.width, self.height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

    def _draw_array(self, tex_id: int, data: np.ndarray) -> None:  # pragma: no cover - visual
        if data.shape[0] == 0:
            return
        verts = np.ascontiguousarray(data[:, 0:2])
        colors = np.ascontiguousarray(data[:, 2:5])
        uvs = np.ascontiguousarray(data[:, 5:7])

        glEnable(GL_TEXTURE_2D)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glTexEnvi(GL_TEXTURE_ENV, GL_TEXTURE_ENV_MODE, GL_MODULATE)
        glBindTexture(GL_TEXTURE_2D, tex_id)

        glEnableClientState(GL_VERTEX_ARRAY)
        glEnableClientState(GL_COLOR_ARRAY)
        glEnableClientState(GL_TEXTURE_COORD_ARRAY)
        glVertexPointer(2, GL_FLOAT, 0, verts)
        glColorPointer(3, GL_FLOAT, 0, colors)
        glTexCoordPointer(2, GL_FLOAT, 0, uvs)
        glDrawArrays(GL_TRIANGLES, 0, data.shape[0])
        glDisableClientState(GL_TEXTURE_COORD_ARRAY)
        glDisableClientState(GL_COLOR_ARRAY)
        glDisableClientState(GL_VERTEX_ARRAY)

        glDisable(GL_BLEND)
        glDisable(GL_TEXTURE_2D)

    def draw_backdrop(self, backdrop: TileBackdrop) -> None:  # pragma: no cover - visual
        tex_id = self.textures.get(backdrop.texture_key)
        if not tex_id:
            return
        ensure_texture_repeat(tex_id)
        tex_size = get_texture_size(tex_id) or backdrop.size
        u0, u1, v_top, v_bottom = tiled_uv(backdrop.size, tex_size, backdrop.tile_position_x)
        data = quad_vertices(
            backdrop.center, backdrop.size, u0=u0, u1=u1, v_top=v_top, v_bottom=v_bottom
        )
        self._draw_array(tex_id, data)

    def draw_bodies(self, bodies: Iterable[Body]) -> None:  # pragma: no cover - visual
        by_texture: Dict[int, List[np.ndarray]] = defaultdict(list)
        for body in bodies:
            if not body.visible or not body.alive:
                continue
            tex_id = self.textures.get(body.texture_key)
            if not tex_id:
                continue
            by_texture[tex_id].append(
                quad_vertices(
                    (body.x, body.y), body.size, color=tint_to_color(body.tint)
                )
            )
        for tex_id, quads in by_texture.items():
            self._draw_array(tex_id, batch(quads))


__all__ = ["SpriteRenderer"]
