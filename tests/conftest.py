import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from dataclasses import dataclass, field
from typing import List

import pytest

from endless_runner.controls.keyboard import KeyState
from endless_runner.core.timers import TimerScheduler
from endless_runner.world.physics import ArcadePhysics
from endless_runner.world.run_controller import RunController

FRAME_DT = 1.0 / 60.0


class FakeAudio:
    def __init__(self) -> None:
        self.played: List[str] = []

    def play(self, key: str, **kwargs) -> None:
        self.played.append(key)


class KeyFeed:
    """Stands in for keyboard polling; tests flip `current` between frames."""

    def __init__(self) -> None:
        self.current = KeyState()

    def __call__(self) -> KeyState:
        return self.current


class FixedRng:
    def __init__(self, value: int) -> None:
        self.value = value

    def randint(self, a: int, b: int) -> int:
        return self.value


@dataclass
class Harness:
    controller: RunController
    keys: KeyFeed
    audio: FakeAudio
    frames: int = field(default=0)

    @property
    def state(self):
        return self.controller.state

    @property
    def player(self):
        return self.controller.player

    def frame(self, dt: float = FRAME_DT) -> None:
        self.controller.timers.advance(dt * 1000.0)
        self.controller.physics.step(dt)
        self.controller.update()
        self.frames += 1

    def run(self, n: int, dt: float = FRAME_DT) -> None:
        for _ in range(n):
            self.frame(dt)

    def settle(self, max_frames: int = 120) -> None:
        """Run until the player has landed (can_jump restored)."""
        for _ in range(max_frames):
            self.frame()
            if self.state.can_jump and self.player.velocity.y == 0:
                return
        raise AssertionError("player never landed")


def make_harness(rng=None, create: bool = True) -> Harness:
    keys = KeyFeed()
    audio = FakeAudio()
    controller = RunController(
        ArcadePhysics(), TimerScheduler(), keys=keys, audio=audio, rng=rng
    )
    if create:
        controller.create()
    return Harness(controller=controller, keys=keys, audio=audio)


@pytest.fixture
def harness() -> Harness:
    # Long spawn delay keeps obstacles out of tests that don't want them
    return make_harness(rng=FixedRng(3000))
