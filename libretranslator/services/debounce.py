# libretranslator/services/debounce.py
"""
Debounced auto-translate trigger.

Every commit re-arms a single timer; only the text of the last commit in a
quiet window of `delay_ms` reaches the callback. While auto-translate is off
or a request is pending, commits are dropped (not queued).
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_DELAY_MS = 1000


class DebounceScheduler:
    """Owns the one debounce timer of a session."""

    def __init__(
        self,
        callback: Callable[[str], Awaitable[object]],
        is_enabled: Callable[[], bool],
        is_busy: Callable[[], bool],
        delay_ms: int = DEFAULT_DELAY_MS,
    ) -> None:
        self._callback = callback
        self._is_enabled = is_enabled
        self._is_busy = is_busy
        self.delay_ms = delay_ms
        self._timer: Optional[asyncio.TimerHandle] = None
        # Fired callbacks run as tasks; keep references until they finish
        self._running: set[asyncio.Task] = set()
        self._closed = False

    @property
    def armed(self) -> bool:
        return self._timer is not None

    def arm(self, text: str) -> bool:
        """Restart the delay for `text`. Returns False when the commit is dropped."""
        if self._closed:
            return False
        if not self._is_enabled() or self._is_busy():
            logger.debug("Debounce not armed (enabled=%s, busy=%s)", self._is_enabled(), self._is_busy())
            return False
        if not text.strip():
            return False

        self.cancel()
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self.delay_ms / 1000, self._fire, text)
        logger.debug("Debounce armed (%d ms, chars=%d)", self.delay_ms, len(text))
        return True

    def cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def close(self) -> None:
        """Cancel the timer and refuse further arms (session teardown)."""
        self._closed = True
        self.cancel()

    def _fire(self, text: str) -> None:
        self._timer = None
        logger.debug("Debounce fired (chars=%d)", len(text))
        task = asyncio.ensure_future(self._callback(text))
        self._running.add(task)
        task.add_done_callback(self._running.discard)
