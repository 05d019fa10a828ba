"""Readers for the ``SP_*`` environment knobs."""

from __future__ import annotations

import math
import os

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off"}


def parse_bool_env(value: str | None) -> bool | None:
    """Parse an on/off switch such as ``SP_UNICODE`` or ``SP_LOG_JSON``.

    Unrecognized words count as unset, so a typo never forces a setting off.
    """
    if value is None:
        return None
    word = value.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    return None


def parse_float_env(value: str | None) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def duration_ms_env(name: str, default: float) -> float:
    """Read a millisecond duration from ``name`` and return it in seconds.

    Anything other than a positive number falls back to ``default``.
    """
    millis = parse_float_env(os.environ.get(name))
    if millis is None or not math.isfinite(millis) or millis <= 0:
        return default
    return millis / 1000
