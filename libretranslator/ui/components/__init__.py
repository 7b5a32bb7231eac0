# libretranslator/ui/components/__init__.py
"""
UI components for LibreTranslator.
"""

from .text_panel import create_language_bar, create_result_panel, create_source_panel

__all__ = [
    'create_language_bar',
    'create_result_panel',
    'create_source_panel',
]
