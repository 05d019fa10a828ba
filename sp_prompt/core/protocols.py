from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Protocol

if TYPE_CHECKING:
    from sp_prompt.system.engine import SelectSession


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class TimerScheduler(Protocol):
    def __call__(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class SelectRunner(Protocol):
    scheduler: TimerScheduler

    def run(self, session: "SelectSession") -> Any: ...
