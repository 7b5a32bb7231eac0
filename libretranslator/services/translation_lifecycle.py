# libretranslator/services/translation_lifecycle.py
"""
Request lifecycle for text translation.

One job at a time:

    Idle / Succeeded / Failed --submit--> Pending --> Succeeded | Failed

A submit while Pending is ignored, and blank text never leaves the current
state. Endpoint errors are recovered here: they become a Failed job and an
error message, never an exception for the caller.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional, Protocol, TYPE_CHECKING

from libretranslator.models.types import JobState, TranslationJob
from libretranslator.services.exceptions import ApplicationError, TransportError
from libretranslator.services.locale import Locale
from libretranslator.services.messages import MessageBoard

if TYPE_CHECKING:
    from libretranslator.ui.state import AppState

logger = logging.getLogger(__name__)


class TranslationEndpoint(Protocol):
    def translate(self, text: str, target_lang: str, source_lang: str) -> str: ...


class TranslationLifecycle:
    """Owns the current TranslationJob of a session."""

    def __init__(
        self,
        state: "AppState",
        client: TranslationEndpoint,
        messages: MessageBoard,
        locale: Optional[Locale] = None,
        on_change: Optional[Callable[[TranslationJob], None]] = None,
    ) -> None:
        self.state = state
        self._client = client
        self._messages = messages
        self.locale = locale or Locale()
        self._on_change = on_change

    @property
    def job(self) -> TranslationJob:
        return self.state.job

    @property
    def is_pending(self) -> bool:
        return self.state.job.is_pending

    async def submit(self, text: str, source_lang: str, target_lang: str) -> Optional[TranslationJob]:
        """Translate `text` and update the session state.

        Returns the finished job, or None when the call was ignored (blank
        text or a job already pending).
        """
        if not text.strip():
            logger.debug("Submit ignored: empty input")
            return None
        if self.is_pending:
            logger.info("Submit ignored: a translation is already pending")
            return None

        # Set before the first await so a re-entrant submit sees Pending
        job = TranslationJob(
            source_text=text,
            source_lang=source_lang,
            target_lang=target_lang,
            state=JobState.PENDING,
        )
        self.state.job = job
        self._notify(job)
        logger.info("Translation started (chars=%d, %s -> %s)", len(text), source_lang, target_lang)

        try:
            translated = await asyncio.to_thread(self._client.translate, text, target_lang, source_lang)
        except ApplicationError as e:
            job.state = JobState.FAILED
            logger.warning("Translation rejected by endpoint (code=%s)", e.code)
            self._messages.show(self.locale.t("translationFailed"), is_error=True)
        except TransportError as e:
            job.state = JobState.FAILED
            logger.warning("Translation request failed: %s", e)
            self._messages.show(self.locale.t("translationError"), is_error=True)
        except asyncio.CancelledError:
            # Session torn down while waiting; leave no job stuck in Pending
            job.state = JobState.FAILED
            raise
        except Exception as e:
            job.state = JobState.FAILED
            logger.exception("Unexpected translation error: %s", e)
            self._messages.show(self.locale.t("translationError"), is_error=True)
        else:
            job.state = JobState.SUCCEEDED
            job.result = translated
            self.state.set_translated_text(translated)
            logger.info("Translation succeeded (chars=%d)", len(translated))
            self._messages.show(self.locale.t("translationSuccess"), is_error=False)
        finally:
            self._notify(job)

        return job

    def _notify(self, job: TranslationJob) -> None:
        if self._on_change is not None:
            self._on_change(job)
