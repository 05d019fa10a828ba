import pytest

from sp_prompt.system.models import Choice
from sp_prompt.system.pagination import (
    PaginationViewport,
    finite_position,
    infinite_position,
)

pytestmark = pytest.mark.unit_prompt


def _items(count: int) -> list[Choice]:
    return [Choice(f"item-{idx}") for idx in range(count)]


def _label(item, is_active: bool) -> str:
    return f"{'>' if is_active else ' '} {item.value}"


def test_finite_position_clamps_to_list_ends() -> None:
    assert finite_position(active=2, total=5, page_size=7) == 2
    assert finite_position(active=1, total=20, page_size=7) == 1
    assert finite_position(active=10, total=20, page_size=7) == 3
    assert finite_position(active=18, total=20, page_size=7) == 5
    assert finite_position(active=19, total=20, page_size=7) == 6


def test_infinite_position_moves_down_to_middle_only() -> None:
    assert infinite_position(active=1, last_active=0, total=20, page_size=7, pointer=0) == 1
    assert infinite_position(active=5, last_active=4, total=20, page_size=7, pointer=3) == 3
    assert infinite_position(active=3, last_active=4, total=20, page_size=7, pointer=3) == 3
    # wrapping from last to first is a long jump; the row stays
    assert infinite_position(active=0, last_active=19, total=20, page_size=7, pointer=3) == 3
    assert infinite_position(active=4, last_active=2, total=5, page_size=7, pointer=0) == 4


def test_finite_window_is_contiguous_and_contains_active() -> None:
    viewport = PaginationViewport(page_size=7, loop=False)
    for active in range(20):
        indices, position = viewport.window(20, active)
        assert indices == list(range(indices[0], indices[0] + 7))
        assert indices[position] == active


def test_infinite_window_wraps_around_list_end() -> None:
    viewport = PaginationViewport(page_size=3, loop=True)

    assert viewport.window(5, 0) == ([0, 1, 2], 0)
    assert viewport.window(5, 1) == ([0, 1, 2], 1)
    assert viewport.window(5, 2) == ([1, 2, 3], 1)
    assert viewport.window(5, 4) == ([3, 4, 0], 1)
    assert viewport.window(5, 0) == ([4, 0, 1], 1)


def test_window_is_stable_for_repeated_renders() -> None:
    viewport = PaginationViewport(page_size=3, loop=True)
    viewport.window(5, 0)
    viewport.window(5, 1)
    assert viewport.window(5, 1) == viewport.window(5, 1)


def test_render_lines_when_list_fits() -> None:
    viewport = PaginationViewport(page_size=7, loop=True)
    lines = viewport.render(_items(3), 1, _label, overflow_hint="(more)")
    assert lines == ["  item-0", "> item-1", "  item-2"]


def test_render_appends_overflow_hint_for_long_lists() -> None:
    viewport = PaginationViewport(page_size=3, loop=False)
    lines = viewport.render(_items(5), 4, _label, overflow_hint="(more)")
    assert lines == ["  item-2", "  item-3", "> item-4", "(more)"]


def test_render_fits_multiline_active_item() -> None:
    def render(item, is_active: bool) -> str:
        return f"{item.value}\n  details" if is_active else str(item.value)

    viewport = PaginationViewport(page_size=3, loop=False)
    lines = viewport.render(_items(3), 1, render)
    assert lines == ["item-0", "item-1", "  details"]

    viewport = PaginationViewport(page_size=3, loop=False)
    lines = viewport.render(_items(3), 2, render)
    assert lines == ["item-1", "item-2", "  details"]
