"""Centralized texture loading for the run scene.

`load_run_textures()` loads every image the run draws and returns them keyed
the same way bodies and backdrops name them (`texture_key`). Missing files
come back as the checkerboard test texture, so the dict is always complete.
Requires an active GL context.
"""

from __future__ import annotations

from typing import Dict, Mapping

from endless_runner.textures.resourcepath import IMAGE_ASSETS
from endless_runner.textures.texture_utils import load_texture


def load_run_textures(manifest: Mapping[str, str] = IMAGE_ASSETS) -> Dict[str, int]:
    return {key: load_texture(path) for key, path in manifest.items()}
