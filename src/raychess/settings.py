"""Application settings shared by the terminal and Qt front ends."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"
    log_level: str = "WARNING"

    # Terminal
    use_color: bool = True
    clear_screen: bool = True

    # Board window
    show_legal_moves: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Defaults overridden by ``RAYCHESS_*`` environment variables.

        Raises:
            ValueError: A variable holds an unrecognised value.
        """
        env = os.environ if environ is None else environ
        settings = cls()
        if "RAYCHESS_LANGUAGE" in env:
            settings.language = env["RAYCHESS_LANGUAGE"]
        if "RAYCHESS_LOG_LEVEL" in env:
            level = env["RAYCHESS_LOG_LEVEL"].upper()
            if level not in LOG_LEVELS:
                raise ValueError(
                    f"RAYCHESS_LOG_LEVEL must be one of {LOG_LEVELS}, got {level!r}"
                )
            settings.log_level = level
        if "RAYCHESS_COLOR" in env:
            settings.use_color = _parse_bool("RAYCHESS_COLOR", env["RAYCHESS_COLOR"])
        if "RAYCHESS_CLEAR_SCREEN" in env:
            settings.clear_screen = _parse_bool(
                "RAYCHESS_CLEAR_SCREEN", env["RAYCHESS_CLEAR_SCREEN"]
            )
        return settings


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")
