"""Sound loading and playback utilities for pygame.mixer.

A tiny registry so the run logic can reference cues by key ("gameover")
without juggling file paths or Sound objects.

Usage:

    from endless_runner.sound.sound_utils import Sounds

    Sounds.ensure_init()  # safe to call many times
    Sounds.load_manifest({"gameover": "assets/audio/gameover.wav"})
    Sounds.play("gameover")

All operations fail gracefully if the mixer can't initialize or a file is
missing; problems are printed once and calls become no-ops.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Set
import os
import pygame

from endless_runner.config import MUTE


class Sounds:
    """Static manager for loading and playing short SFX.

    Notes
    -----
    - Initializes pygame.mixer lazily on first use.
    - `play()` grabs a free channel (stealing one if necessary) and returns it.
    - Muting is global and checked at play time.
    """

    _inited: bool = False
    _failed_init: bool = False
    _muted: bool = MUTE
    _sounds: Dict[str, pygame.mixer.Sound] = {}
    _missing_warned: Set[str] = set()

    @classmethod
    def ensure_init(
        cls,
        *,
        frequency: int = 44100,
        size: int = -16,
        channels: int = 2,
        buffer: int = 512,
    ) -> bool:
        """Initialize pygame.mixer if needed. Returns True on success."""
        if cls._inited:
            return True
        if cls._failed_init:
            return False
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(
                    frequency=frequency, size=size, channels=channels, buffer=buffer
                )
            cls._inited = pygame.mixer.get_init() is not None
            return cls._inited
        except pygame.error as e:  # pragma: no cover - environment dependent
            print(f"[Sounds] Mixer init failed: {e}")
            cls._failed_init = True
            return False

    @classmethod
    def is_available(cls) -> bool:
        return cls._inited and (pygame.mixer.get_init() is not None)

    @classmethod
    def set_muted(cls, muted: bool) -> None:
        cls._muted = bool(muted)

    @classmethod
    def is_muted(cls) -> bool:
        return cls._muted

    @classmethod
    def load(
        cls, key: str, path: str, *, volume: Optional[float] = None
    ) -> Optional[pygame.mixer.Sound]:
        """Load a sound file and register it under `key`.

        Raises FileNotFoundError if the path doesn't exist.
        Returns the Sound, or None if audio is unavailable or decoding failed.
        """
        if not os.path.exists(path):
            raise FileNotFoundError(path)
        if not cls.ensure_init():
            return None
        try:
            snd = pygame.mixer.Sound(path)
        except pygame.error as e:  # pragma: no cover - file/codec dependent
            print(f"[Sounds] Failed to load '{key}' from {path}: {e}")
            return None
        if volume is not None:
            snd.set_volume(max(0.0, min(1.0, float(volume))))
        cls._sounds[key] = snd
        return snd

    @classmethod
    def load_optional(
        cls, key: str, path: str, *, volume: Optional[float] = None
    ) -> Optional[pygame.mixer.Sound]:
        """Load sound if the file exists; otherwise print a note and return None."""
        if not os.path.exists(path):
            print(f"[Sounds] Skipping missing file for '{key}': {path}")
            return None
        return cls.load(key, path, volume=volume)

    @classmethod
    def load_manifest(cls, manifest: Mapping[str, str]) -> int:
        """Load every key -> path pair that exists. Returns how many loaded."""
        loaded = 0
        for key, path in manifest.items():
            if cls.load_optional(key, path) is not None:
                loaded += 1
        return loaded

    @classmethod
    def is_loaded(cls, key: str) -> bool:
        return key in cls._sounds

    @classmethod
    def play(
        cls,
        key: str,
        *,
        volume: Optional[float] = None,
        loops: int = 0,
    ) -> Optional[pygame.mixer.Channel]:
        """Play a registered sound by key; None if nothing was played."""
        if cls._muted or not cls.is_available():
            return None
        snd = cls._sounds.get(key)
        if snd is None:
            # Warn once per key
            if key not in cls._missing_warned:
                print(f"[Sounds] Warning: sound '{key}' not loaded")
                cls._missing_warned.add(key)
            return None

        ch = pygame.mixer.find_channel(True)
        if ch is None:
            return None
        if volume is not None:
            ch.set_volume(max(0.0, min(1.0, float(volume))))
        ch.play(snd, loops=loops)
        return ch


__all__ = ["Sounds"]
