"""Polled keyboard state for the runner: arrow keys plus spacebar."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import pygame


@dataclass(frozen=True)
class KeyState:
    left: bool = False
    right: bool = False
    up: bool = False
    space: bool = False

    @property
    def wants_jump(self) -> bool:
        return self.up or self.space


def poll_keyboard(pressed: Optional[Sequence[bool]] = None) -> KeyState:
    """Snapshot the keys the run cares about.

    `pressed` defaults to `pygame.key.get_pressed()`; pass a sequence indexed
    by pygame key constants to poll something else.
    """
    keys = pygame.key.get_pressed() if pressed is None else pressed
    return KeyState(
        left=bool(keys[pygame.K_LEFT]),
        right=bool(keys[pygame.K_RIGHT]),
        up=bool(keys[pygame.K_UP]),
        space=bool(keys[pygame.K_SPACE]),
    )


__all__ = ["KeyState", "poll_keyboard"]
