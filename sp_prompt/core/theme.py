from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from rich.console import Console
from rich.text import Text

from sp_prompt.core.capabilities import color_disabled, is_unicode_supported

ROLE_STYLES: dict[str, str] = {
    "message": "bold",
    "help": "dim",
    "answer": "cyan",
    "highlight": "cyan",
    "disabled": "dim",
    "bar": "cyan",
    "bar.done": "bright_black",
    "icon.pending": "cyan",
    "icon.done": "green",
}


@dataclass(frozen=True)
class Glyphs:
    step_active: str
    step_submit: str
    bar: str
    bar_end: str
    radio_active: str
    radio_inactive: str


UNICODE_GLYPHS = Glyphs(
    step_active="◆",
    step_submit="◇",
    bar="│",
    bar_end="└",
    radio_active="●",
    radio_inactive="○",
)

ASCII_GLYPHS = Glyphs(
    step_active="*",
    step_submit="o",
    bar="|",
    bar_end="—",
    radio_active=">",
    radio_inactive=" ",
)


def glyphs_for(unicode: bool) -> Glyphs:
    return UNICODE_GLYPHS if unicode else ASCII_GLYPHS


class Theme:
    """Maps semantic roles to decorated text.

    Styles are rich style strings; decorated text is rendered to ANSI so any
    runtime that understands SGR sequences (prompt_toolkit's ``ANSI``) can
    display it. Callers compose roles and never inspect the decoration.
    """

    def __init__(
        self,
        overrides: Mapping[str, str] | None = None,
        *,
        color: bool | None = None,
        unicode: bool | None = None,
    ) -> None:
        self.styles: dict[str, str] = {**ROLE_STYLES, **dict(overrides or {})}
        self.color = (not color_disabled()) if color is None else color
        self.glyphs = glyphs_for(is_unicode_supported() if unicode is None else unicode)
        self._console = Console(
            force_terminal=True,
            color_system="standard" if self.color else None,
            no_color=not self.color,
            highlight=False,
            markup=False,
            emoji=False,
            soft_wrap=True,
        )

    def style(self, role: str, text: str) -> str:
        style = self.styles.get(role, "")
        if not self.color or not style or not text:
            return text
        with self._console.capture() as cap:
            self._console.print(Text(text, style=style), end="")
        return cap.get()

    def disabled(self, text: str) -> str:
        return self.style("disabled", f"- {text}")


def plain_theme(*, unicode: bool = True) -> Theme:
    """Return an undecorated theme, handy for snapshots and headless runs."""
    return Theme(color=False, unicode=unicode)
