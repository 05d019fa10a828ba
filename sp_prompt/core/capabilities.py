from __future__ import annotations

import os
import sys

from sp_common.config.env import parse_bool_env

_UNICODE_TERM_PROGRAMS = {"Terminus-Sublime", "vscode"}
_UNICODE_TERMS = {"xterm-256color", "alacritty"}


def is_tty_available() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def is_unicode_supported() -> bool:
    """Return True when the terminal can be trusted with box and radio glyphs.

    ``SP_UNICODE`` forces the answer either way.
    """
    forced = parse_bool_env(os.environ.get("SP_UNICODE"))
    if forced is not None:
        return forced

    env = os.environ
    if sys.platform != "win32":
        # The Linux console font lacks most box drawing glyphs.
        return env.get("TERM") != "linux"

    return (
        bool(env.get("WT_SESSION"))
        or bool(env.get("TERMINUS_SUBLIME"))
        or env.get("ConEmuTask") == "{cmd::Cmder}"
        or env.get("TERM_PROGRAM") in _UNICODE_TERM_PROGRAMS
        or env.get("TERM") in _UNICODE_TERMS
        or env.get("TERMINAL_EMULATOR") == "JetBrains-JediTerm"
    )


def color_disabled() -> bool:
    """Honor the NO_COLOR convention (any non-empty value disables color)."""
    return bool(os.environ.get("NO_COLOR"))
