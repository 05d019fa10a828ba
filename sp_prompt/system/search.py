"""Type-ahead search and number-key jumps.

The handler owns the search buffer and at most one expiry timer. Every key
that touches the buffer cancels the pending timer first; only printable keys
schedule a new one, and when it fires the buffer is cleared so a stale partial
match never steers a later keystroke.
"""

from __future__ import annotations

import logging
from typing import Callable

from sp_common.config.env import duration_ms_env
from sp_prompt.core.protocols import TimerHandle, TimerScheduler
from sp_prompt.system.choices import ChoiceList

logger = logging.getLogger(__name__)

SEARCH_EXPIRY_SECONDS = 0.7


def search_expiry_seconds() -> float:
    """Expiry delay, overridable in milliseconds through SP_SEARCH_EXPIRY_MS."""
    return duration_ms_env("SP_SEARCH_EXPIRY_MS", SEARCH_EXPIRY_SECONDS)


class SearchJumpHandler:
    def __init__(
        self,
        scheduler: TimerScheduler,
        *,
        expiry: float | None = None,
        on_expire: Callable[[], None] | None = None,
    ) -> None:
        self.buffer = ""
        self._scheduler = scheduler
        self._expiry = search_expiry_seconds() if expiry is None else expiry
        self._on_expire = on_expire
        self._timer: TimerHandle | None = None

    @property
    def timer_pending(self) -> bool:
        return self._timer is not None

    def cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def reset(self) -> None:
        self.cancel_timer()
        self.buffer = ""

    def close(self) -> None:
        self.reset()

    def jump(self, choices: ChoiceList, digit: int) -> int | None:
        """Resolve a number key to an item index; None when it points nowhere useful."""
        self.reset()
        target = digit - 1
        if choices.is_selectable_at(target):
            return target
        return None

    def search(self, choices: ChoiceList, char: str) -> int | None:
        """Append ``char`` to the buffer and return the first matching index."""
        self.cancel_timer()
        self.buffer += char.lower()
        match = choices.find_prefix(self.buffer)
        self._timer = self._scheduler(self._expiry, self._expire)
        if match < 0:
            logger.debug("search %r: no match", self.buffer)
            return None
        logger.debug("search %r: matched index %d", self.buffer, match)
        return match

    def _expire(self) -> None:
        self._timer = None
        self.buffer = ""
        logger.debug("search buffer expired")
        if self._on_expire is not None:
            self._on_expire()
