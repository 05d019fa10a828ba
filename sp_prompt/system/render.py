from __future__ import annotations

from typing import TYPE_CHECKING

from sp_prompt.core.theme import Theme
from sp_prompt.system.choices import display_label
from sp_prompt.system.models import Item, ItemKind, Status
from sp_prompt.system.pagination import PaginationViewport

if TYPE_CHECKING:
    from sp_prompt.system.engine import SelectSession

HELP_TIP = "(Use arrow keys)"
OVERFLOW_HINT = "(Use arrow keys to reveal more choices)"
DISABLED_LABEL = "(disabled)"


class SelectRenderer:
    """Assembles the prompt text (header, page, answer) for a session."""

    def __init__(self, session: "SelectSession", theme: Theme) -> None:
        self._session = session
        self.theme = theme
        self.viewport = PaginationViewport(session.config.page_size, session.config.loop)
        self._first_render = True

    def render_item(self, item: Item, is_active: bool) -> str:
        theme = self.theme
        glyphs = theme.glyphs
        bar = theme.style("bar", glyphs.bar)
        if item.kind is ItemKind.SEPARATOR:
            return f"{bar}   {item.label}"

        label = display_label(item)
        if item.disabled:
            reason = item.disabled if isinstance(item.disabled, str) else DISABLED_LABEL
            return theme.disabled(f"{label} {reason}")

        cursor = glyphs.radio_active if is_active else glyphs.radio_inactive
        line = f"{cursor} {label}"
        if is_active:
            line = theme.style("highlight", line)
        return f"{bar}  {line}"

    def header(self) -> str:
        session = self._session
        theme = self.theme
        glyphs = theme.glyphs

        help_tip = ""
        if self._first_render:
            self._first_render = False
            if len(session.choices) <= session.config.page_size:
                help_tip = theme.style("help", HELP_TIP)

        if session.status is Status.DONE:
            icon = theme.style("icon.done", glyphs.step_submit)
        else:
            icon = theme.style("icon.pending", glyphs.step_active)

        parts = [theme.style("message", session.config.message), help_tip]
        title = " ".join(part for part in parts if part)
        return f"{theme.style('bar.done', glyphs.bar)}\n{icon}  {title}\n"

    def render(self) -> str:
        session = self._session
        theme = self.theme
        title = self.header()

        if session.status is Status.DONE:
            answer = theme.style("answer", display_label(session.selected_choice))
            return f"{title}{theme.style('bar.done', theme.glyphs.bar)} {answer}"

        page = "\n".join(
            self.viewport.render(
                session.choices.items,
                session.active,
                self.render_item,
                overflow_hint=theme.style("help", OVERFLOW_HINT),
            )
        )
        description = session.selected_choice.description
        description_block = f"\n{description}" if description else ""
        return f"{title}{page}{description_block}\n{theme.style('bar', theme.glyphs.bar_end)}"
