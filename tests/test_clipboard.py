# tests/test_clipboard.py
"""Tests for libretranslator.services.clipboard"""

from unittest.mock import AsyncMock

import pytest

from libretranslator.services.clipboard import ClipboardService
from libretranslator.services.exceptions import ClipboardError
from libretranslator.services.locale import Locale
from libretranslator.services.messages import MessageBoard


class TestClipboardService:
    """Tests for ClipboardService.copy()"""

    @pytest.mark.asyncio
    async def test_copy_success(self):
        writer = AsyncMock()
        messages = MessageBoard()
        service = ClipboardService(writer, messages, Locale("en"))

        assert await service.copy("你好") is True

        writer.assert_awaited_once_with("你好")
        assert messages.current.text == "Copied to clipboard"
        assert messages.current.is_error is False

    @pytest.mark.asyncio
    async def test_copy_failure(self):
        writer = AsyncMock(side_effect=ClipboardError("denied"))
        messages = MessageBoard()
        service = ClipboardService(writer, messages, Locale("en"))

        assert await service.copy("text") is False

        assert messages.current.text == "Copy failed"
        assert messages.current.is_error is True

    @pytest.mark.asyncio
    async def test_copy_timeout_is_failure(self):
        writer = AsyncMock(side_effect=TimeoutError())
        messages = MessageBoard()
        service = ClipboardService(writer, messages)

        assert await service.copy("text") is False
        assert messages.current.is_error is True

    @pytest.mark.asyncio
    async def test_no_retry(self):
        writer = AsyncMock(side_effect=ClipboardError("denied"))
        service = ClipboardService(writer, MessageBoard())
        await service.copy("text")
        assert writer.await_count == 1
