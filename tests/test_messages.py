# tests/test_messages.py
"""Tests for libretranslator.services.messages"""

import asyncio
from unittest.mock import Mock

import pytest

from libretranslator.services.messages import MessageBoard


class FakeClock:
    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestMessageBoardSync:
    """MessageBoard without a running event loop"""

    def test_show_sets_current(self):
        board = MessageBoard(duration_ms=2000, clock=FakeClock())
        message = board.show("Copied", is_error=False)
        assert board.current is message
        assert message.text == "Copied"
        assert message.is_error is False
        assert message.expires_at == pytest.approx(102.0)

    def test_current_expires_without_timer(self):
        clock = FakeClock()
        board = MessageBoard(duration_ms=2000, clock=clock)
        board.show("Translation failed", is_error=True)
        clock.now += 1.999
        assert board.current is not None
        clock.now += 0.001
        assert board.current is None

    def test_later_message_replaces_earlier(self):
        board = MessageBoard(clock=FakeClock())
        board.show("first")
        second = board.show("second", is_error=True)
        assert board.current is second

    def test_on_change_called(self):
        on_change = Mock()
        board = MessageBoard(on_change=on_change, clock=FakeClock())
        message = board.show("hello")
        on_change.assert_called_once_with(message)
        board.clear()
        on_change.assert_called_with(None)

    def test_clear_when_empty_does_not_notify(self):
        on_change = Mock()
        board = MessageBoard(on_change=on_change)
        board.clear()
        on_change.assert_not_called()


class TestMessageBoardTimers:
    """MessageBoard auto-clear on a running loop"""

    @pytest.mark.asyncio
    async def test_auto_clears_after_duration(self):
        on_change = Mock()
        board = MessageBoard(duration_ms=20, on_change=on_change)
        board.show("ok")
        await asyncio.sleep(0.05)
        assert board.current is None
        on_change.assert_called_with(None)

    @pytest.mark.asyncio
    async def test_earlier_timer_clears_later_message(self):
        """Each clear removes whatever is current when it fires"""
        clock = FakeClock()
        board = MessageBoard(duration_ms=200, clock=clock)
        board.show("first")
        await asyncio.sleep(0.1)
        board.show("second")
        # first timer fires at ~200 ms, the second not before ~300 ms
        await asyncio.sleep(0.15)
        assert board.current is None

    @pytest.mark.asyncio
    async def test_close_cancels_scheduled_clears(self):
        on_change = Mock()
        clock = FakeClock()
        board = MessageBoard(duration_ms=20, on_change=on_change, clock=clock)
        board.show("bye")
        board.close()
        await asyncio.sleep(0.04)
        # Timer cancelled: no clear notification after the show
        assert on_change.call_count == 1
