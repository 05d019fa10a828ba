"""Choice list model: selectability, bounds and lookups over the item tuple."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from sp_common.errors import ConfigurationError
from sp_prompt.system.models import Bounds, Choice, Item, is_selectable, normalize_items

logger = logging.getLogger(__name__)


def display_label(choice: Choice) -> str:
    return choice.name or str(choice.value)


def compute_bounds(items: Sequence[Item]) -> Bounds:
    first = next((idx for idx, item in enumerate(items) if is_selectable(item)), -1)
    if first < 0:
        raise ConfigurationError(
            "No selectable choices. All choices are disabled.",
            context={"choices": len(items)},
        )
    last = next(
        idx for idx in range(len(items) - 1, -1, -1) if is_selectable(items[idx])
    )
    return Bounds(first=first, last=last)


def _same_value(value: Any, default: Any) -> bool:
    # True == 1 and 1.0 == 1 in Python; a default only matches its own type.
    return type(value) is type(default) and value == default


def initial_index(
    items: Sequence[Item],
    bounds: Bounds,
    default: Any = None,
    *,
    has_default: bool = False,
) -> int:
    if has_default:
        for idx, item in enumerate(items):
            if is_selectable(item) and _same_value(item.value, default):
                return idx
        logger.debug("default %r matches no selectable choice", default)
    return bounds.first


class ChoiceList:
    """The immutable item sequence of one prompt plus its derived bounds."""

    def __init__(self, items: Sequence[Any]) -> None:
        self._items: tuple[Item, ...] = normalize_items(items)
        self.bounds = compute_bounds(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> tuple[Item, ...]:
        return self._items

    def item(self, index: int) -> Item | None:
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def is_selectable_at(self, index: int) -> bool:
        item = self.item(index)
        return item is not None and is_selectable(item)

    def choice(self, index: int) -> Choice:
        item = self._items[index]
        if not isinstance(item, Choice):
            raise IndexError(f"item {index} is a separator")
        return item

    def find_prefix(self, prefix: str) -> int:
        """Index of the first selectable item whose label starts with ``prefix``.

        The scan always starts at the top of the list; -1 when nothing matches.
        """
        needle = prefix.lower()
        for idx, item in enumerate(self._items):
            if is_selectable(item) and display_label(item).lower().startswith(needle):
                return idx
        return -1
