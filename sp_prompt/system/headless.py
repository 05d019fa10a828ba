from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence, Union

from sp_common.errors import HeadlessScriptError
from sp_prompt.system.engine import SelectSession
from sp_prompt.system.timers import ManualScheduler


@dataclass(frozen=True)
class Wait:
    """Script step that advances the virtual clock."""

    seconds: float


ScriptStep = Union[str, Wait]


@dataclass
class HeadlessRunner:
    """Drives a session from a key script instead of a terminal.

    Keys are named like the terminal runtime names them (``"enter"``,
    ``"up"``, ``"down"``, ``"backspace"``) or given as single characters.
    Every accepted event records a frame. ``frames`` and ``resolved`` describe
    the latest ``run()`` only.
    """

    keys: Sequence[ScriptStep] = ()
    scheduler: ManualScheduler = field(default_factory=ManualScheduler)
    frames: list[str] = field(default_factory=list)
    resolved: list[Any] = field(default_factory=list)

    def run(self, session: SelectSession) -> Any:
        self.frames = []
        self.resolved = []
        previous_on_done = session.on_done
        session.on_done = self.resolved.append
        try:
            self.frames.append(session.render())
            for step in self.keys:
                if isinstance(step, Wait):
                    self.scheduler.advance(step.seconds)
                    continue
                if session.handle_key(step):
                    self.frames.append(session.render())
        finally:
            session.on_done = previous_on_done

        if not session.done:
            session.close()
            raise HeadlessScriptError(
                "Key script ended before the prompt resolved.",
                context={"keys": list(map(str, self.keys)), "active": session.active},
            )
        return session.value
