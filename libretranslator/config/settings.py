# libretranslator/config/settings.py
"""
Application settings management for LibreTranslator.

Settings are layered:
- settings.template.json: developer defaults
- user_settings.json: only the keys the user changed in the UI
- environment variables: endpoint URL, authorization and passphrase
  (deployment secrets are never written to JSON)

Loaded settings are cached per path and reloaded when either file's
mtime changes.
"""

import json
import logging
import os
import threading
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional

from libretranslator.models.types import AUTO_DETECT, SOURCE_LANGUAGES, TARGET_LANGUAGES

# Module logger
logger = logging.getLogger(__name__)

# Settings cache: path -> (mtime_template, mtime_user, AppSettings)
# Entries are private snapshots; load() hands out copies
_settings_cache: dict[str, tuple[float, float, "AppSettings"]] = {}
_settings_cache_lock = threading.Lock()

# Settings the user can change from the UI (saved to user_settings.json)
USER_SETTINGS_KEYS = {
    "auto_translate",
    "ui_language",
    "source_lang",
    "target_lang",
}

# Environment variable -> field name
ENV_OVERRIDES = {
    "LIBRETRANSLATOR_API_URL": "api_url",
    "LIBRETRANSLATOR_API_AUTHORIZATION": "api_authorization",
    "LIBRETRANSLATOR_PASSWORD": "password",
}

UI_LANGUAGES = ("en", "zh", "de")

# Field types checked on load (JSON values are not type-checked by the dataclass)
_INT_FIELDS = ("request_timeout", "debounce_delay_ms", "message_duration_ms", "port")
_BOOL_FIELDS = ("auto_translate", "native")
_OPTIONAL_STR_FIELDS = ("password", "ui_language")


@dataclass
class AppSettings:
    """Application settings"""

    # Translation endpoint
    api_url: str = ""                       # Requests go to {api_url}/v2/translate
    api_authorization: str = ""             # Sent verbatim as the Authorization header
    request_timeout: int = 30               # Seconds (transport level)

    # Session gate (None or "" = always open)
    password: Optional[str] = None

    # Text translation
    auto_translate: bool = True
    source_lang: str = AUTO_DETECT
    target_lang: str = "EN"
    debounce_delay_ms: int = 1000
    message_duration_ms: int = 2000

    # UI
    ui_language: Optional[str] = None      # None = follow the browser
    host: str = "127.0.0.1"
    port: int = 8080
    native: bool = False

    @property
    def gate_enabled(self) -> bool:
        return bool(self.password)

    @classmethod
    def load(cls, path: Path, use_cache: bool = True) -> "AppSettings":
        """Load settings from the template, user settings and environment.

        Args:
            path: Base settings path (config/settings.json). The template and
                  user_settings.json are looked up next to it.
            use_cache: Reuse a cached instance while both files are unchanged.
        """
        config_dir = path.parent
        template_path = config_dir / "settings.template.json"
        user_settings_path = config_dir / "user_settings.json"

        cache_key = str(path.resolve())

        template_mtime = template_path.stat().st_mtime if template_path.exists() else 0.0
        user_mtime = user_settings_path.stat().st_mtime if user_settings_path.exists() else 0.0

        if use_cache:
            with _settings_cache_lock:
                if cache_key in _settings_cache:
                    cached_template_mtime, cached_user_mtime, cached_settings = _settings_cache[cache_key]
                    if cached_template_mtime == template_mtime and cached_user_mtime == user_mtime:
                        logger.debug("Using cached settings for: %s", path)
                        return replace(cached_settings)

        data = {}

        # 1. Developer defaults
        if template_path.exists():
            try:
                with open(template_path, 'r', encoding='utf-8-sig') as f:
                    data = json.load(f)
                    logger.debug("Loaded template settings from: %s", template_path)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                logger.warning("Failed to load template settings: %s", e)

        # 2. User overrides (known keys only)
        if user_settings_path.exists():
            try:
                with open(user_settings_path, 'r', encoding='utf-8-sig') as f:
                    user_data = json.load(f)
                    for key in USER_SETTINGS_KEYS:
                        if key in user_data:
                            data[key] = user_data[key]
                    logger.debug("Loaded user settings from: %s", user_settings_path)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                logger.warning("Failed to load user settings: %s", e)

        # 3. Environment
        for env_name, key in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is not None:
                data[key] = value

        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}

        settings = cls(**filtered_data)
        settings._validate()

        with _settings_cache_lock:
            _settings_cache[cache_key] = (template_mtime, user_mtime, replace(settings))

        return settings

    def _validate(self) -> None:
        """Reset out-of-range or unknown values to their defaults."""
        self._check_types()

        if self.debounce_delay_ms < 100 or self.debounce_delay_ms > 10000:
            logger.warning("debounce_delay_ms out of range (%d), resetting to 1000", self.debounce_delay_ms)
            self.debounce_delay_ms = 1000

        if self.message_duration_ms < 500 or self.message_duration_ms > 60000:
            logger.warning("message_duration_ms out of range (%d), resetting to 2000", self.message_duration_ms)
            self.message_duration_ms = 2000

        if self.request_timeout < 1:
            logger.warning("request_timeout too small (%d), resetting to 30", self.request_timeout)
            self.request_timeout = 30
        elif self.request_timeout > 600:
            logger.warning("request_timeout too large (%d), resetting to 30", self.request_timeout)
            self.request_timeout = 30

        if self.source_lang not in SOURCE_LANGUAGES:
            logger.warning("Unknown source_lang %r, resetting to %s", self.source_lang, AUTO_DETECT)
            self.source_lang = AUTO_DETECT
        if self.target_lang not in TARGET_LANGUAGES:
            logger.warning("Unknown target_lang %r, resetting to EN", self.target_lang)
            self.target_lang = "EN"

        if self.ui_language is not None and self.ui_language not in UI_LANGUAGES:
            logger.warning("Unknown ui_language %r, following the browser", self.ui_language)
            self.ui_language = None

        self.api_url = self.api_url.rstrip("/")

    def _check_types(self) -> None:
        """Coerce or reset values whose JSON type does not match the field."""
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in _INT_FIELDS:
                if isinstance(value, int) and not isinstance(value, bool):
                    continue
                if isinstance(value, (str, float)):
                    try:
                        setattr(self, f.name, int(value))
                        logger.debug("Coerced %s=%r to int", f.name, value)
                        continue
                    except (ValueError, OverflowError):
                        pass
            elif f.name in _BOOL_FIELDS:
                if isinstance(value, bool):
                    continue
            elif f.name in _OPTIONAL_STR_FIELDS:
                if value is None or isinstance(value, str):
                    continue
                # A numeric passphrase in JSON must not open the gate
                if isinstance(value, (int, float)) and not isinstance(value, bool):
                    setattr(self, f.name, str(value))
                    continue
            elif isinstance(value, str):
                continue
            logger.warning("Invalid type for %s (%r), resetting to %r", f.name, value, f.default)
            setattr(self, f.name, f.default)

    def save(self, path: Path) -> None:
        """Save the user-changeable settings to user_settings.json.

        The template is never modified. The cache entry is refreshed so the
        next load() returns a copy of these values.
        """
        config_dir = path.parent
        user_settings_path = config_dir / "user_settings.json"
        template_path = config_dir / "settings.template.json"

        config_dir.mkdir(parents=True, exist_ok=True)

        data = {key: getattr(self, key) for key in sorted(USER_SETTINGS_KEYS)}

        with open(user_settings_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        logger.debug("Saved user settings to: %s", user_settings_path)

        cache_key = str(path.resolve())
        template_mtime = template_path.stat().st_mtime if template_path.exists() else 0.0
        user_mtime = user_settings_path.stat().st_mtime if user_settings_path.exists() else 0.0
        with _settings_cache_lock:
            _settings_cache[cache_key] = (template_mtime, user_mtime, replace(self))


def get_default_settings_path() -> Path:
    """Get default settings file path"""
    return Path(__file__).parent.parent.parent / "config" / "settings.json"


def invalidate_settings_cache(path: Optional[Path] = None) -> None:
    """Invalidate settings cache.

    Args:
        path: Clear only this path's entry. None clears everything.
    """
    with _settings_cache_lock:
        if path is None:
            _settings_cache.clear()
            logger.debug("Cleared all settings cache")
        else:
            cache_key = str(path.resolve())
            if cache_key in _settings_cache:
                del _settings_cache[cache_key]
                logger.debug("Cleared settings cache for: %s", path)
