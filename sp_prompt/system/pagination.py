"""Pagination viewport.

The viewport decides which slice of the item list is visible and at which
row the active item sits. Without looping the window is clamped to the list
ends. With looping the cursor row is remembered between renders: it follows
the active item down to the middle row and then stays put while the list
scrolls and wraps under it.
"""

from __future__ import annotations

from typing import Callable, Sequence, TypeAlias

from sp_prompt.system.models import Item

ItemRenderer: TypeAlias = Callable[[Item, bool], str]


def finite_position(active: int, total: int, page_size: int) -> int:
    middle = page_size // 2
    if total <= page_size or active < middle:
        return active
    if active >= total - middle:
        return active + page_size - total
    return middle


def infinite_position(
    active: int,
    last_active: int,
    total: int,
    page_size: int,
    pointer: int,
) -> int:
    if total <= page_size:
        return active
    # Only a short move down advances the cursor row, and never past the middle.
    if last_active < active and active - last_active < page_size:
        return min(page_size // 2, pointer + active - last_active)
    return pointer


class PaginationViewport:
    def __init__(self, page_size: int, loop: bool) -> None:
        self.page_size = page_size
        self.loop = loop
        self._pointer = 0
        self._last_active = 0

    def overflows(self, total: int) -> bool:
        return total > self.page_size

    def window(self, total: int, active: int) -> tuple[list[int], int]:
        """Return the visible indices in display order and the active item's slot."""
        if self.loop:
            position = infinite_position(
                active, self._last_active, total, self.page_size, self._pointer
            )
        else:
            position = finite_position(active, total, self.page_size)
        self._pointer = position
        self._last_active = active

        start = active - position
        indices = [(start + offset) % total for offset in range(min(self.page_size, total))]
        return indices, position

    def render(
        self,
        items: Sequence[Item],
        active: int,
        render_item: ItemRenderer,
        *,
        overflow_hint: str = "",
    ) -> list[str]:
        indices, position = self.window(len(items), active)
        page_size = self.page_size

        def lines_at(slot: int) -> list[str]:
            if slot < 0 or slot >= len(indices):
                return []
            index = indices[slot]
            return render_item(items[index], index == active).split("\n")

        page: list[str | None] = [None] * page_size

        active_lines = lines_at(position)[:page_size]
        if position + len(active_lines) <= page_size:
            active_row = position
        else:
            active_row = page_size - len(active_lines)
        page[active_row : active_row + len(active_lines)] = active_lines

        row = active_row + len(active_lines)
        slot = position + 1
        while row < page_size and slot < len(indices):
            for line in lines_at(slot):
                page[row] = line
                row += 1
                if row >= page_size:
                    break
            slot += 1

        row = active_row - 1
        slot = position - 1
        while row >= 0 and slot >= 0:
            for line in reversed(lines_at(slot)):
                page[row] = line
                row -= 1
                if row < 0:
                    break
            slot -= 1

        lines = [line for line in page if line is not None]
        if overflow_hint and self.overflows(len(items)):
            lines.append(overflow_hint)
        return lines
