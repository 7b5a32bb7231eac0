# libretranslator/services/messages.py
"""
Transient status messages (translation result, copy result, wrong password).

A message is shown for a fixed window and then cleared. Every shown message
schedules its own clear, and that clear removes whatever is current when it
fires: a later message can disappear early if an earlier message's window
ends first.
"""

import asyncio
import logging
import time
from typing import Callable, Optional

from libretranslator.models.types import TransientMessage

logger = logging.getLogger(__name__)

DEFAULT_DURATION_MS = 2000


class MessageBoard:
    """Holds at most one TransientMessage for a UI session."""

    def __init__(
        self,
        duration_ms: int = DEFAULT_DURATION_MS,
        on_change: Optional[Callable[[Optional[TransientMessage]], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.duration_ms = duration_ms
        self._on_change = on_change
        self._clock = clock
        self._message: Optional[TransientMessage] = None
        self._clear_handles: set[asyncio.TimerHandle] = set()

    @property
    def current(self) -> Optional[TransientMessage]:
        message = self._message
        if message is not None and message.is_expired(self._clock()):
            return None
        return message

    def show(self, text: str, is_error: bool = False) -> TransientMessage:
        duration_s = self.duration_ms / 1000
        message = TransientMessage(text=text, is_error=is_error, expires_at=self._clock() + duration_s)
        self._message = message
        if is_error:
            logger.debug("Error message shown: %s", text)
        self._schedule_clear(duration_s)
        self._notify()
        return message

    def clear(self) -> None:
        if self._message is None:
            return
        self._message = None
        self._notify()

    def close(self) -> None:
        """Cancel scheduled clears (session teardown)."""
        for handle in self._clear_handles:
            handle.cancel()
        self._clear_handles.clear()

    def _schedule_clear(self, delay_s: float) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No loop (sync caller): expiry is still honoured by `current`
            return
        handle: Optional[asyncio.TimerHandle] = None

        def _expire() -> None:
            self._clear_handles.discard(handle)
            self.clear()

        handle = loop.call_later(delay_s, _expire)
        self._clear_handles.add(handle)

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self._message)
