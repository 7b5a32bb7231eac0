# libretranslator/services/session_gate.py
"""
Passphrase gate in front of the translator UI.
"""

from __future__ import annotations

import hmac
import logging
from typing import Optional, TYPE_CHECKING

from libretranslator.services.locale import Locale
from libretranslator.services.messages import MessageBoard

if TYPE_CHECKING:
    from libretranslator.ui.state import AppState

logger = logging.getLogger(__name__)


class SessionGate:
    """Opens the session when the passphrase matches (always open without one)."""

    def __init__(
        self,
        state: "AppState",
        passphrase: Optional[str],
        messages: MessageBoard,
        locale: Optional[Locale] = None,
    ) -> None:
        self.state = state
        self._passphrase = passphrase or ""
        self._messages = messages
        self.locale = locale or Locale()
        if not self._passphrase:
            self.state.authenticated = True

    @property
    def is_open(self) -> bool:
        return self.state.authenticated

    def unlock(self, attempt: str) -> bool:
        if self.state.authenticated:
            return True
        if hmac.compare_digest(attempt.encode("utf-8"), self._passphrase.encode("utf-8")):
            self.state.authenticated = True
            logger.info("Session unlocked")
            return True
        logger.warning("Session unlock failed: wrong passphrase")
        self._messages.show(self.locale.t("wrongPassword"), is_error=True)
        return False
