# libretranslator/models/types.py
"""
Core data types for the LibreTranslator client.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Sentinel source language: omit source_lang and let the endpoint detect it
AUTO_DETECT = "AUTO"

SOURCE_LANGUAGES: tuple[str, ...] = (
    AUTO_DETECT, 'ZH', 'AR', 'BG', 'CS', 'DA', 'DE', 'EL', 'EN', 'ES', 'ET',
    'FI', 'FR', 'HU', 'ID', 'IT', 'JA', 'KO', 'LT', 'LV', 'NB', 'NL', 'PL',
    'PT', 'RO', 'RU', 'SK', 'SL', 'SV', 'TR', 'UK',
)

TARGET_LANGUAGES: tuple[str, ...] = (
    'ZH', 'ZH-HANS', 'ZH-HANT', 'AR', 'BG', 'CS', 'DA', 'DE', 'EL', 'EN',
    'EN-GB', 'EN-US', 'ES', 'ET', 'FI', 'FR', 'HU', 'ID', 'IT', 'JA', 'KO',
    'LT', 'LV', 'NB', 'NL', 'PL', 'PT', 'PT-BR', 'PT-PT', 'RO', 'RU', 'SK',
    'SL', 'SV', 'TR', 'UK',
)


class JobState(Enum):
    """Translation job states"""
    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class EditableText:
    """
    Text shown in an editable area.
    The length is derived so the character counter can never drift from the content.
    """
    content: str = ""

    @property
    def length(self) -> int:
        return len(self.content)

    def update(self, content: str) -> None:
        self.content = content

    def is_blank(self) -> bool:
        return not self.content.strip()


@dataclass
class TranslationJob:
    """
    One translation attempt.

    A newer job supersedes the current one; jobs are never queued.
    """
    source_text: str = ""
    source_lang: str = AUTO_DETECT
    target_lang: str = "EN"
    state: JobState = JobState.IDLE
    result: Optional[str] = None

    @property
    def is_pending(self) -> bool:
        return self.state == JobState.PENDING

    @property
    def is_finished(self) -> bool:
        return self.state in (JobState.SUCCEEDED, JobState.FAILED)


@dataclass(frozen=True)
class TransientMessage:
    """User-facing notification that disappears after a fixed window."""
    text: str
    is_error: bool
    expires_at: float               # Clock value (seconds) after which the message is gone

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at
