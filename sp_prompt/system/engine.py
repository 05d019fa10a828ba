"""Selection state machine.

A ``SelectSession`` owns the prompt state of one invocation. Runtimes feed it
classified key events through :meth:`SelectSession.handle`, re-render through
:meth:`SelectSession.render` whenever ``on_change`` fires, and receive the
resolved value exactly once through ``on_done``.

The search expiry timer goes through the ``scheduler`` the session is built
with, normally the runner's own: ``loop_scheduler`` inside a running asyncio
loop, or a ``ManualScheduler`` when the host drives the clock itself.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable

from sp_prompt.core.keys import KeyEvent, KeyKind, classify_key
from sp_prompt.core.protocols import TimerScheduler
from sp_prompt.core.theme import Theme
from sp_prompt.system.choices import ChoiceList, initial_index
from sp_prompt.system.models import Choice, PromptState, SelectConfig, Status
from sp_prompt.system.render import SelectRenderer
from sp_prompt.system.search import SearchJumpHandler

logger = logging.getLogger(__name__)


class SelectSession:
    def __init__(
        self,
        config: SelectConfig,
        *,
        scheduler: TimerScheduler,
        theme: Theme | None = None,
        on_change: Callable[[], None] | None = None,
        on_done: Callable[[Any], None] | None = None,
    ) -> None:
        self.config = config
        self.choices = ChoiceList(config.choices)
        self.state = PromptState(
            active_index=initial_index(
                self.choices.items,
                self.choices.bounds,
                config.default,
                has_default=config.has_default,
            )
        )
        self.search = SearchJumpHandler(scheduler, on_expire=self._notify)
        self.renderer = SelectRenderer(self, theme or Theme(config.theme))
        self.on_change = on_change
        self.on_done = on_done
        self._value: Any = None

    @property
    def status(self) -> Status:
        return self.state.status

    @property
    def done(self) -> bool:
        return self.state.status is Status.DONE

    @property
    def active(self) -> int:
        return self.state.active_index

    @property
    def selected_choice(self) -> Choice:
        return self.choices.choice(self.state.active_index)

    @property
    def value(self) -> Any:
        if not self.done:
            raise RuntimeError("prompt has not resolved yet")
        return self._value

    def handle_key(self, key: str | Enum, data: str = "") -> bool:
        return self.handle(classify_key(key, data))

    def handle(self, event: KeyEvent | None) -> bool:
        """Apply one key event; returns True when the prompt state changed."""
        if event is None or self.done:
            return False

        before = self.state.active_index
        if event.kind is KeyKind.ENTER:
            self._resolve()
            self._notify()
            return True

        if event.kind in (KeyKind.UP, KeyKind.DOWN):
            self.search.reset()
            self._move(-1 if event.kind is KeyKind.UP else 1)
        elif event.kind is KeyKind.DIGIT:
            target = self.search.jump(self.choices, event.digit)
            if target is not None:
                self.state.active_index = target
        elif event.kind is KeyKind.BACKSPACE:
            self.search.reset()
        else:
            match = self.search.search(self.choices, event.char)
            if match is not None:
                self.state.active_index = match

        if self.state.active_index == before:
            return False
        logger.debug("active %d -> %d (%s)", before, self.state.active_index, event.kind.value)
        self._notify()
        return True

    def render(self) -> str:
        return self.renderer.render()

    def close(self) -> None:
        self.search.close()

    def _move(self, offset: int) -> None:
        bounds = self.choices.bounds
        active = self.state.active_index
        if not self.config.loop and (
            (offset < 0 and active == bounds.first)
            or (offset > 0 and active == bounds.last)
        ):
            return
        total = len(self.choices)
        index = active
        while True:
            index = (index + offset) % total
            if self.choices.is_selectable_at(index):
                break
        self.state.active_index = index

    def _resolve(self) -> None:
        self.search.close()
        self._value = self.selected_choice.value
        self.state.status = Status.DONE
        logger.debug("resolved at index %d", self.state.active_index)
        if self.on_done is not None:
            self.on_done(self._value)

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change()
