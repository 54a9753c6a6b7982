"""Texture loading utilities for OpenGL.

Keeps a tiny registry of texture sizes so the renderer can convert pixel
scroll offsets into UV offsets from a texture ID alone.
"""

import pygame
from typing import Optional, Tuple, Dict
from OpenGL.GL import (
    glGenTextures,
    glBindTexture,
    glTexImage2D,
    glTexParameteri,
    GL_TEXTURE_2D,
    GL_RGBA,
    GL_UNSIGNED_BYTE,
    GL_TEXTURE_MIN_FILTER,
    GL_TEXTURE_MAG_FILTER,
    GL_TEXTURE_WRAP_S,
    GL_TEXTURE_WRAP_T,
    GL_NEAREST,
    GL_CLAMP_TO_EDGE,
    GL_REPEAT,
)

_TEXTURE_SIZES: Dict[int, Tuple[int, int]] = {}
_REPEAT_SET: set = set()


def get_texture_size(tex_id: int) -> Optional[Tuple[int, int]]:
    """Return (width, height) for a loaded texture ID, if known."""
    return _TEXTURE_SIZES.get(int(tex_id))


def _upload(surface: pygame.Surface, *, wrap: int) -> int:
    texture_data = pygame.image.tostring(surface, "RGBA", True)
    width, height = surface.get_size()

    texture_id = glGenTextures(1)
    glBindTexture(GL_TEXTURE_2D, texture_id)
    glTexImage2D(
        GL_TEXTURE_2D,
        0,
        GL_RGBA,
        width,
        height,
        0,
        GL_RGBA,
        GL_UNSIGNED_BYTE,
        texture_data,
    )
    # Nearest keeps pixel art crisp
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_NEAREST)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_NEAREST)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_S, wrap)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_T, wrap)

    _TEXTURE_SIZES[int(texture_id)] = (int(width), int(height))
    if wrap == GL_REPEAT:
        _REPEAT_SET.add(int(texture_id))
    return int(texture_id)


def load_texture(filename: str) -> int:
    """Load an image file into a GL texture and return its ID.

    Falls back to `create_test_texture()` if the file is missing or can't be
    decoded, so callers always get something drawable.
    """
    try:
        surface = pygame.image.load(filename).convert_alpha()
    except (pygame.error, FileNotFoundError) as e:
        print(f"[Textures] Failed to load texture {filename}: {e}")
        return create_test_texture()
    return _upload(surface, wrap=GL_CLAMP_TO_EDGE)


def ensure_texture_repeat(tex_id: int) -> None:
    """Switch a texture to GL_REPEAT wrapping (needed for scrolling strips)."""
    tex_id = int(tex_id)
    if tex_id in _REPEAT_SET:
        return
    glBindTexture(GL_TEXTURE_2D, tex_id)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_S, GL_REPEAT)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_T, GL_REPEAT)
    _REPEAT_SET.add(tex_id)


def create_test_texture(size: int = 64, tile: int = 8) -> int:
    """Red/transparent checkerboard used when an image asset is missing."""
    surface = pygame.Surface((size, size), pygame.SRCALPHA)
    red = (255, 0, 0, 255)
    transparent = (0, 0, 0, 0)
    for y in range(size):
        ty = y // tile
        for x in range(size):
            tx = x // tile
            surface.set_at((x, y), red if (tx + ty) % 2 == 0 else transparent)

    texture_id = _upload(surface, wrap=GL_REPEAT)
    print(f"[Textures] Created checkerboard test texture (ID: {texture_id})")
    return texture_id
