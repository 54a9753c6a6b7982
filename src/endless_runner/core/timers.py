"""Frame-driven timed events.

The engine loop feeds elapsed frame time into `TimerScheduler.advance()`;
due events fire synchronously on the same thread, in due-time order. There
is deliberately no cancellation: events live as long as the scheduler does.

    timers = TimerScheduler()
    timers.add_event(2500, speed_up)                      # fixed period
    timers.add_event(lambda: rng.randint(1000, 3000), spawn)  # re-rolled each arm
    timers.advance(dt_ms)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Union

DelaySource = Union[float, int, Callable[[], float]]


@dataclass
class TimerEvent:
    delay: DelaySource
    callback: Callable[[], None]
    loop: bool = True
    due_at: float = 0.0
    fired: int = 0
    done: bool = False

    def next_delay(self) -> float:
        d = self.delay() if callable(self.delay) else self.delay
        d = float(d)
        if d <= 0.0:
            raise ValueError(f"timer delay must be positive, got {d}")
        return d


class TimerScheduler:
    """Repeating callbacks measured in logical milliseconds."""

    def __init__(self) -> None:
        self.now: float = 0.0
        self._events: List[TimerEvent] = []

    def add_event(
        self, delay: DelaySource, callback: Callable[[], None], *, loop: bool = True
    ) -> TimerEvent:
        event = TimerEvent(delay=delay, callback=callback, loop=loop)
        event.due_at = self.now + event.next_delay()
        self._events.append(event)
        return event

    @property
    def events(self) -> List[TimerEvent]:
        return [e for e in self._events if not e.done]

    def advance(self, elapsed_ms: float) -> int:
        """Move logical time forward and fire everything that came due.

        Returns the number of callbacks invoked.
        """
        if elapsed_ms < 0:
            raise ValueError("cannot advance time backwards")
        target = self.now + float(elapsed_ms)
        fired = 0
        while True:
            pending = [e for e in self._events if not e.done and e.due_at <= target]
            if not pending:
                break
            # Earliest first; ties keep registration order (min is stable)
            event = min(pending, key=lambda e: e.due_at)
            self.now = event.due_at
            if event.loop:
                event.due_at = event.due_at + event.next_delay()
            else:
                event.done = True
            event.fired += 1
            event.callback()
            fired += 1
        self.now = target
        self._events = [e for e in self._events if not e.done]
        return fired


__all__ = ["TimerEvent", "TimerScheduler"]
