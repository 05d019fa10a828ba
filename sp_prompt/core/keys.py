"""Key classification.

The engine never sees raw key representations: runtimes translate whatever
their input layer delivers into a :class:`KeyEvent` through :func:`classify_key`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class KeyKind(str, Enum):
    ENTER = "enter"
    UP = "up"
    DOWN = "down"
    DIGIT = "digit"
    BACKSPACE = "backspace"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    kind: KeyKind
    char: str = ""

    @property
    def digit(self) -> int:
        return int(self.char) if self.kind is KeyKind.DIGIT else -1


_NAMED_KEYS: dict[str, KeyKind] = {
    "enter": KeyKind.ENTER,
    "c-m": KeyKind.ENTER,
    "c-j": KeyKind.ENTER,
    "up": KeyKind.UP,
    "c-p": KeyKind.UP,
    "down": KeyKind.DOWN,
    "c-n": KeyKind.DOWN,
    "backspace": KeyKind.BACKSPACE,
    "c-h": KeyKind.BACKSPACE,
}


def classify_key(key: str | Enum, data: str = "") -> KeyEvent | None:
    """Classify a key press.

    ``key`` is the key name (prompt_toolkit ``Keys`` values such as ``"up"`` or
    ``"c-m"``, or the character itself); ``data`` is the text the key produced,
    when any. Returns ``None`` for non-printable keys the prompt has no use for.
    """
    name = key.value if isinstance(key, Enum) else key
    kind = _NAMED_KEYS.get(name.lower())
    if kind is not None:
        return KeyEvent(kind)

    char = data or name
    if len(char) != 1 or not char.isprintable():
        return None
    if char in "0123456789":
        return KeyEvent(KeyKind.DIGIT, char)
    return KeyEvent(KeyKind.OTHER, char)
