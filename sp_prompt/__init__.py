"""
Single-select terminal prompt with arrow, number-key and type-ahead navigation.
"""

from sp_common.errors import ConfigurationError, TerminalUnavailableError
from sp_prompt.api import (
    Choice,
    HeadlessRunner,
    SelectConfig,
    SelectSession,
    Separator,
    TerminalRunner,
    Wait,
    build_config,
    select,
)

__all__ = [
    "select",
    "build_config",
    "Choice",
    "Separator",
    "SelectConfig",
    "SelectSession",
    "TerminalRunner",
    "HeadlessRunner",
    "Wait",
    "ConfigurationError",
    "TerminalUnavailableError",
]
