# libretranslator/services/__init__.py
"""
Service layer for LibreTranslator: the input-to-translation pipeline and
its collaborators (endpoint client, messages, gate, clipboard, locale).
"""

from .exceptions import ApplicationError, ClipboardError, TranslationError, TransportError
from .messages import MessageBoard

# Lazy-loaded services via __getattr__
_LAZY_IMPORTS = {
    'TranslationClient': 'translation_client',
    'TranslationLifecycle': 'translation_lifecycle',
    'DebounceScheduler': 'debounce',
    'TextInputTracker': 'input_tracker',
    'SessionGate': 'session_gate',
    'ClipboardService': 'clipboard',
    'Locale': 'locale',
}

# Submodules that can be accessed via __getattr__ (for patching support)
_SUBMODULES = {
    'translation_client', 'translation_lifecycle', 'debounce', 'input_tracker',
    'session_gate', 'clipboard', 'locale', 'messages', 'exceptions',
}


def __getattr__(name: str):
    """Lazy-load service modules on first access."""
    import importlib
    if name in _SUBMODULES:
        return importlib.import_module(f'.{name}', __package__)
    if name in _LAZY_IMPORTS:
        module_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(f'.{module_name}', __package__)
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'ApplicationError',
    'ClipboardError',
    'TranslationError',
    'TransportError',
    'MessageBoard',
    'TranslationClient',
    'TranslationLifecycle',
    'DebounceScheduler',
    'TextInputTracker',
    'SessionGate',
    'ClipboardService',
    'Locale',
]
