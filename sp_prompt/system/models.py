from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ItemKind(str, Enum):
    CHOICE = "choice"
    SEPARATOR = "separator"


class Status(str, Enum):
    PENDING = "pending"
    DONE = "done"


@dataclass(frozen=True)
class Separator:
    label: str = "──────────────"
    kind: ItemKind = field(default=ItemKind.SEPARATOR, init=False)


@dataclass(frozen=True)
class Choice:
    value: Any
    name: str | None = None
    description: str | None = None
    disabled: bool | str = False  # a string is the reason shown instead of "(disabled)"
    kind: ItemKind = field(default=ItemKind.CHOICE, init=False)


Item = Union[Choice, Separator]


def is_selectable(item: Item) -> bool:
    return item.kind is ItemKind.CHOICE and not item.disabled


def normalize_items(raw: Sequence[Any]) -> tuple[Item, ...]:
    """Return an immutable item tuple; bare values become plain choices."""
    return tuple(
        entry if isinstance(entry, (Choice, Separator)) else Choice(value=entry)
        for entry in raw
    )


@dataclass(frozen=True)
class Bounds:
    first: int
    last: int


@dataclass
class PromptState:
    active_index: int
    status: Status = Status.PENDING


class SelectConfig(BaseModel):
    """Immutable configuration for one prompt invocation.

    ``default`` is optional and may legitimately be ``None``; whether it was
    supplied is read from ``model_fields_set``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    message: str
    choices: tuple[Any, ...]
    page_size: int = Field(default=7, ge=1)
    loop: bool = True
    default: Any = None
    theme: Mapping[str, str] = Field(default_factory=dict)

    @field_validator("choices", mode="before")
    @classmethod
    def _normalize_choices(cls, value: Any) -> tuple[Item, ...]:
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise ValueError("choices must be a sequence of Choice, Separator or values")
        return normalize_items(value)

    @property
    def has_default(self) -> bool:
        return "default" in self.model_fields_set
