"""Shared helpers for select-prompt."""

from sp_common.errors import (
    ConfigurationError,
    HeadlessScriptError,
    SPError,
    TerminalUnavailableError,
)
from sp_common.logging import configure_logging

__all__ = [
    "configure_logging",
    "ConfigurationError",
    "HeadlessScriptError",
    "SPError",
    "TerminalUnavailableError",
]
