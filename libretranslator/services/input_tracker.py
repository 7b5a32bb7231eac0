# libretranslator/services/input_tracker.py
"""
Classifies raw edits of the source text.

Every edit updates the displayed text immediately. Only committed edits
(typing or paste outside an IME composition, composition end) are forwarded;
intermediate composition text is display-only. A committed edit that leaves
the text blank is reported through `on_clear` instead.
"""

import logging
from typing import Callable, Optional

from libretranslator.models.types import EditableText

logger = logging.getLogger(__name__)

# DOM InputEvent.inputType emitted for text inserted by an IME
COMPOSITION_INPUT_TYPE = "insertCompositionText"


class TextInputTracker:
    def __init__(
        self,
        text: EditableText,
        on_commit: Callable[[str], object],
        on_clear: Optional[Callable[[], object]] = None,
    ) -> None:
        self.text = text
        self._on_commit = on_commit
        self._on_clear = on_clear
        self.composing = False

    def on_input(self, value: str, is_composing: bool = False, input_type: Optional[str] = None) -> bool:
        """Plain edit or paste. Returns True when it was forwarded as a commit."""
        self.text.update(value)
        if is_composing or self.composing or input_type == COMPOSITION_INPUT_TYPE:
            return False
        return self._commit(value)

    def on_composition_start(self, value: Optional[str] = None) -> None:
        self.composing = True
        if value is not None:
            self.text.update(value)

    def on_composition_update(self, value: str) -> None:
        self.text.update(value)

    def on_composition_end(self, value: str) -> bool:
        self.composing = False
        self.text.update(value)
        return self._commit(value)

    def _commit(self, value: str) -> bool:
        if not value.strip():
            if self._on_clear is not None:
                self._on_clear()
            return False
        self._on_commit(value)
        return True
