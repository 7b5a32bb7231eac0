# libretranslator/config/__init__.py
"""
Configuration for LibreTranslator.
"""

from .settings import (
    AppSettings,
    USER_SETTINGS_KEYS,
    get_default_settings_path,
    invalidate_settings_cache,
)

__all__ = [
    'AppSettings',
    'USER_SETTINGS_KEYS',
    'get_default_settings_path',
    'invalidate_settings_cache',
]
