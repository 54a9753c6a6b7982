"""Screen-space text for the OpenGL overlay, rendered with pygame fonts.

Labels are rasterized into textures and cached. Dynamic labels (the score)
pass a `key` so one texture slot is reused and only re-uploaded when the
string or color changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple, Optional

import pygame
from OpenGL.GL import (
    glGenTextures,
    glBindTexture,
    glTexImage2D,
    glTexParameteri,
    glPushMatrix,
    glPopMatrix,
    glBegin,
    glEnd,
    glOrtho,
    glLoadIdentity,
    glTexCoord2f,
    glVertex2f,
    glColor4f,
    glBlendFunc,
    glEnable,
    glDisable,
    glMatrixMode,
    GL_TEXTURE_2D,
    GL_TEXTURE_MIN_FILTER,
    GL_TEXTURE_MAG_FILTER,
    GL_LINEAR,
    GL_RGBA,
    GL_UNSIGNED_BYTE,
    GL_BLEND,
    GL_SRC_ALPHA,
    GL_ONE_MINUS_SRC_ALPHA,
    GL_PROJECTION,
    GL_MODELVIEW,
    GL_QUADS,
)

from endless_runner.config import SCORE_FONT_SIZE

Color = Tuple[int, int, int, int]


@dataclass
class _TexSlot:
    id: int
    size: Tuple[int, int]
    last_text: Optional[str] = None
    last_color: Optional[Color] = None


class TextRenderer:
    """Call begin() before drawing labels and end() after."""

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        font: Optional[pygame.font.Font] = None,
        size: int = SCORE_FONT_SIZE,
    ) -> None:
        self.width = screen_width
        self.height = screen_height
        self.font = font or pygame.font.Font(None, size)
        self._cache: Dict[Tuple[str, Color], _TexSlot] = {}
        self._slots: Dict[str, _TexSlot] = {}
        self._in_overlay = False

    # --------------------------- overlay state ---------------------------
    def begin(self) -> None:  # pragma: no cover - visual
        if self._in_overlay:
            return
        glMatrixMode(GL_PROJECTION)
        glPushMatrix()
        glLoadIdentity()
        glOrtho(0, self.width, self.height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glPushMatrix()
        glLoadIdentity()

        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glEnable(GL_TEXTURE_2D)
        self._in_overlay = True

    def end(self) -> None:  # pragma: no cover - visual
        if not self._in_overlay:
            return
        glDisable(GL_TEXTURE_2D)
        glDisable(GL_BLEND)
        glPopMatrix()
        glMatrixMode(GL_PROJECTION)
        glPopMatrix()
        glMatrixMode(GL_MODELVIEW)
        self._in_overlay = False

    # --------------------------- rendering ------------------------------
    def _upload_surface(self, slot: _TexSlot, surf: pygame.Surface) -> None:
        data = pygame.image.tostring(surf, "RGBA", True)
        w, h = surf.get_width(), surf.get_height()
        glBindTexture(GL_TEXTURE_2D, slot.id)
        glTexImage2D(GL_TEXTURE_2D, 0, GL_RGBA, w, h, 0, GL_RGBA, GL_UNSIGNED_BYTE, data)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
        slot.size = (w, h)

    def _slot_for(self, text: str, color: Color, key: Optional[str]) -> _TexSlot:
        if key is None:
            slot = self._cache.get((text, color))
            if slot is None:
                slot = _TexSlot(id=glGenTextures(1), size=(0, 0))
                self._cache[(text, color)] = slot
        else:
            slot = self._slots.get(key)
            if slot is None:
                slot = _TexSlot(id=glGenTextures(1), size=(0, 0))
                self._slots[key] = slot
        if slot.last_text != text or slot.last_color != color:
            self._upload_surface(slot, self.font.render(text, True, color))
            slot.last_text = text
            slot.last_color = color
        return slot

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: Color = (255, 255, 255, 255),
        *,
        key: Optional[str] = None,
    ) -> Tuple[int, int]:  # pragma: no cover - visual
        """Draw a single line with its top-left corner at (x, y). Returns (w, h)."""
        slot = self._slot_for(text, tuple(color), key)
        w, h = slot.size

        glBindTexture(GL_TEXTURE_2D, slot.id)
        glColor4f(1.0, 1.0, 1.0, 1.0)
        glBegin(GL_QUADS)
        # tostring(..., True) flips rows, so v runs bottom-up
        glTexCoord2f(0.0, 1.0)
        glVertex2f(x, y)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(x + w, y)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(x + w, y + h)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(x, y + h)
        glEnd()
        return w, h
