"""Inline prompt_toolkit runtime for the select prompt."""

from __future__ import annotations

from typing import Any

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.output import Output

from sp_common.errors import TerminalUnavailableError
from sp_prompt.core.capabilities import is_tty_available
from sp_prompt.system.engine import SelectSession
from sp_prompt.system.timers import loop_scheduler


class TerminalRunner:
    """Runs a session in the terminal below the current cursor line.

    Keys are delivered by prompt_toolkit on its asyncio loop, and the search
    expiry timer is scheduled on that same loop, so session callbacks never
    overlap.
    """

    scheduler = staticmethod(loop_scheduler)

    def __init__(self, *, input: Input | None = None, output: Output | None = None) -> None:
        self._input = input
        self._output = output

    def _bindings(self, session: SelectSession) -> KeyBindings:
        kb = KeyBindings()

        @kb.add("c-c", eager=True)
        def _(event: Any) -> None:
            session.close()
            event.app.exit(exception=KeyboardInterrupt, style="class:aborting")

        @kb.add("<any>")
        def _(event: Any) -> None:
            key_press = event.key_sequence[0]
            session.handle_key(key_press.key, key_press.data)

        return kb

    def build_application(self, session: SelectSession) -> Application[Any]:
        control = FormattedTextControl(lambda: ANSI(session.render()), focusable=True)
        window = Window(control, always_hide_cursor=True, dont_extend_height=True)
        app: Application[Any] = Application(
            layout=Layout(HSplit([window])),
            key_bindings=self._bindings(session),
            full_screen=False,
            mouse_support=False,
            input=self._input,
            output=self._output,
        )
        session.on_change = app.invalidate
        session.on_done = lambda value: app.exit(result=value)
        return app

    def run(self, session: SelectSession) -> Any:
        if self._input is None and self._output is None and not is_tty_available():
            session.close()
            raise TerminalUnavailableError(
                "Interactive select prompt needs a terminal on stdin and stdout.",
                context={"message": session.config.message},
            )
        app = self.build_application(session)
        try:
            return app.run()
        finally:
            session.close()
