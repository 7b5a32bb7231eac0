# libretranslator/services/clipboard.py
"""
Copy source or result text to the user's clipboard.

The writer is supplied by the UI (browser clipboard API); it raises
ClipboardError or TimeoutError when the copy did not happen.
"""

import logging
from typing import Awaitable, Callable, Optional

from libretranslator.services.exceptions import ClipboardError
from libretranslator.services.locale import Locale
from libretranslator.services.messages import MessageBoard

logger = logging.getLogger(__name__)


class ClipboardService:
    def __init__(
        self,
        writer: Callable[[str], Awaitable[None]],
        messages: MessageBoard,
        locale: Optional[Locale] = None,
    ) -> None:
        self._writer = writer
        self._messages = messages
        self.locale = locale or Locale()

    async def copy(self, text: str) -> bool:
        """Write `text` to the clipboard; the outcome is shown as a message."""
        try:
            await self._writer(text)
        except (ClipboardError, TimeoutError) as e:
            logger.warning("Copy to clipboard failed: %s", e)
            self._messages.show(self.locale.t("copyFailed"), is_error=True)
            return False
        self._messages.show(self.locale.t("copySuccess"), is_error=False)
        return True
