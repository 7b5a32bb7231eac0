# tests/test_session_gate.py
"""Tests for libretranslator.services.session_gate"""

from libretranslator.services.locale import Locale
from libretranslator.services.messages import MessageBoard
from libretranslator.services.session_gate import SessionGate
from libretranslator.ui.state import AppState


class TestSessionGate:
    """Tests for SessionGate"""

    def test_open_without_passphrase(self):
        state = AppState()
        gate = SessionGate(state, None, MessageBoard())
        assert gate.is_open
        assert state.authenticated is True

    def test_empty_passphrase_is_open(self):
        gate = SessionGate(AppState(), "", MessageBoard())
        assert gate.is_open

    def test_closed_with_passphrase(self):
        state = AppState()
        gate = SessionGate(state, "secret", MessageBoard())
        assert not gate.is_open
        assert state.authenticated is False

    def test_unlock_with_correct_passphrase(self):
        state = AppState()
        messages = MessageBoard()
        gate = SessionGate(state, "secret", messages)
        assert gate.unlock("secret") is True
        assert gate.is_open
        assert messages.current is None

    def test_wrong_passphrase_shows_error_and_stays_closed(self):
        state = AppState()
        messages = MessageBoard()
        gate = SessionGate(state, "secret", messages, Locale("zh"))
        assert gate.unlock("guess") is False
        assert not gate.is_open
        assert messages.current is not None
        assert messages.current.is_error is True
        assert messages.current.text == "密码错误"

    def test_non_ascii_passphrase(self):
        gate = SessionGate(AppState(), "密码", MessageBoard())
        assert gate.unlock("密码") is True
