"""Stable prompt API surface."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from pydantic import ValidationError

from sp_common.errors import ConfigurationError, wrap_error
from sp_prompt.core.protocols import SelectRunner
from sp_prompt.core.theme import Theme
from sp_prompt.system.components.select_app import TerminalRunner
from sp_prompt.system.engine import SelectSession
from sp_prompt.system.headless import HeadlessRunner, Wait
from sp_prompt.system.models import Choice, SelectConfig, Separator

_UNSET: Any = object()


def build_config(
    message: str,
    choices: Sequence[Any],
    *,
    page_size: int = 7,
    loop: bool = True,
    default: Any = _UNSET,
    theme: Mapping[str, str] | None = None,
) -> SelectConfig:
    """Validate prompt arguments into a SelectConfig.

    Validation failures surface as ConfigurationError, the one error kind
    callers of the prompt need to handle.
    """
    fields: dict[str, Any] = {
        "message": message,
        "choices": choices,
        "page_size": page_size,
        "loop": loop,
        "theme": dict(theme or {}),
    }
    if default is not _UNSET:
        fields["default"] = default
    try:
        return SelectConfig(**fields)
    except ValidationError as exc:
        raise wrap_error(
            ConfigurationError,
            "Invalid select prompt configuration.",
            context={"errors": [err["msg"] for err in exc.errors()]},
            cause=exc,
        ) from exc


def select(
    message: str,
    choices: Sequence[Any],
    *,
    page_size: int = 7,
    loop: bool = True,
    default: Any = _UNSET,
    theme: Mapping[str, str] | None = None,
    runner: SelectRunner | None = None,
) -> Any:
    """Ask the user to pick one of ``choices`` and return its value.

    Raises ConfigurationError before anything is drawn when the arguments are
    invalid or no choice is selectable. Ctrl-C in the terminal runner raises
    KeyboardInterrupt.
    """
    config = build_config(
        message,
        choices,
        page_size=page_size,
        loop=loop,
        default=default,
        theme=theme,
    )
    runner = runner or TerminalRunner()
    session = SelectSession(config, scheduler=runner.scheduler, theme=Theme(config.theme))
    return runner.run(session)


__all__ = [
    "build_config",
    "select",
    "Choice",
    "Separator",
    "SelectConfig",
    "SelectSession",
    "SelectRunner",
    "TerminalRunner",
    "HeadlessRunner",
    "Wait",
    "Theme",
    "ConfigurationError",
]
