# libretranslator/models/__init__.py
"""
Data models for LibreTranslator.
"""

from .types import (
    AUTO_DETECT,
    SOURCE_LANGUAGES,
    TARGET_LANGUAGES,
    JobState,
    EditableText,
    TranslationJob,
    TransientMessage,
)

__all__ = [
    'AUTO_DETECT',
    'SOURCE_LANGUAGES',
    'TARGET_LANGUAGES',
    'JobState',
    'EditableText',
    'TranslationJob',
    'TransientMessage',
]
