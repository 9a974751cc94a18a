"""Utility helpers shared across the default applications codebase."""

from .config import AppConfig, load_config
from .languages import locale_variants, system_languages
from .logging import configure_logging, get_logger
from .paths import find_program_in_path, is_executable_valid

__all__ = [
    "AppConfig",
    "load_config",
    "locale_variants",
    "system_languages",
    "configure_logging",
    "get_logger",
    "find_program_in_path",
    "is_executable_valid",
]
