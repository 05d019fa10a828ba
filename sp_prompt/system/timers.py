"""Timer schedulers for the search expiry.

``loop_scheduler`` is used inside a running asyncio loop (the prompt_toolkit
runtime). ``ManualScheduler`` is a virtual clock for headless runs and tests.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Callable


def loop_scheduler(delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
    return asyncio.get_running_loop().call_later(delay, callback)


@dataclass
class ManualTimer:
    due: float
    callback: Callable[[], None]
    cancelled: bool = False
    fired: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class ManualScheduler:
    now: float = 0.0
    timers: list[ManualTimer] = field(default_factory=list)

    def __call__(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(due=self.now + delay, callback=callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> list[ManualTimer]:
        return [t for t in self.timers if not t.cancelled and not t.fired]

    def advance(self, seconds: float) -> int:
        """Move the clock forward and fire due timers in order; returns how many fired."""
        self.now += seconds
        fired = 0
        for timer in sorted(self.pending, key=lambda t: t.due):
            if timer.due > self.now:
                break
            if timer.cancelled:
                continue
            timer.fired = True
            timer.callback()
            fired += 1
        # Callbacks may have scheduled new timers; keep only the live ones.
        self.timers = self.pending
        return fired
