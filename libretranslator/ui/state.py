# libretranslator/ui/state.py
"""
Session state for one LibreTranslator UI session.
"""

import logging
from dataclasses import dataclass, field

from libretranslator.models.types import (
    AUTO_DETECT,
    SOURCE_LANGUAGES,
    TARGET_LANGUAGES,
    EditableText,
    TranslationJob,
)

# Module logger
logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """
    Session state.
    Single source of truth for the UI; owned by one browser session and
    passed explicitly to the services that read or update it.
    """
    # Source side
    source: EditableText = field(default_factory=EditableText)
    source_lang: str = AUTO_DETECT

    # Result side (also user-editable)
    translated: EditableText = field(default_factory=EditableText)
    target_lang: str = "EN"

    # Current translation job (superseded, never queued)
    job: TranslationJob = field(default_factory=TranslationJob)

    # Gating flags
    auto_translate: bool = True
    authenticated: bool = False

    # UI language ("en", "zh", "de")
    ui_language: str = "en"

    @property
    def text_translating(self) -> bool:
        return self.job.is_pending

    @property
    def input_char_count(self) -> int:
        return self.source.length

    @property
    def output_char_count(self) -> int:
        return self.translated.length

    def can_translate(self) -> bool:
        """Check if a translation may be submitted now"""
        return not self.source.is_blank() and not self.text_translating

    def set_source_text(self, text: str) -> None:
        self.source.update(text)

    def set_translated_text(self, text: str) -> None:
        """Replace the result text (translation result or manual edit)."""
        self.translated.update(text)

    def set_source_lang(self, code: str) -> None:
        if code not in SOURCE_LANGUAGES:
            raise ValueError(f"Unknown source language: {code}")
        self.source_lang = code

    def set_target_lang(self, code: str) -> None:
        if code not in TARGET_LANGUAGES:
            raise ValueError(f"Unknown target language: {code}")
        self.target_lang = code

    def can_swap_languages(self) -> bool:
        return self.source_lang != AUTO_DETECT and self.target_lang != AUTO_DETECT

    def swap_languages(self) -> bool:
        """Exchange source and target language.

        Refused while the source is auto-detect: there is no target to
        swap it into. Regional target variants (e.g. EN-GB) are not valid
        source codes either, so those swaps are refused as well.
        """
        if not self.can_swap_languages():
            return False
        if self.target_lang not in SOURCE_LANGUAGES or self.source_lang not in TARGET_LANGUAGES:
            logger.debug("Swap refused: %s <-> %s is not a valid pair", self.source_lang, self.target_lang)
            return False
        self.source_lang, self.target_lang = self.target_lang, self.source_lang
        return True
