"""Configuration helpers shared across select-prompt packages."""

from sp_common.config.env import duration_ms_env, parse_bool_env, parse_float_env

__all__ = ["duration_ms_env", "parse_bool_env", "parse_float_env"]
