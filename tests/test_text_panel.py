# tests/test_text_panel.py
"""
Tests for libretranslator.ui.components.text_panel.

NiceGUI's `ui` is replaced by a MagicMock; the registered handlers are
then driven with the event objects NiceGUI would pass.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from libretranslator.config.settings import AppSettings
from libretranslator.ui.app import create_app
from libretranslator.ui.components.text_panel import create_source_panel, event_payload


@pytest.fixture
def mock_ui():
    with patch('libretranslator.ui.components.text_panel.ui', MagicMock()) as mocked:
        yield mocked


@pytest.fixture
def translator(tmp_path):
    settings = AppSettings(api_url="http://localhost:1188", debounce_delay_ms=100)
    app = create_app(settings, settings_path=tmp_path / "settings.json")
    yield app
    app.close()


def build_panel(translator, mock_ui):
    create_source_panel(
        state=translator.state,
        locale=translator.locale,
        on_source_change=translator._on_source_change,
        on_composition_start=translator._on_composition_start,
        on_composition_update=translator._on_composition_update,
        on_composition_end=translator._on_composition_end,
        on_translate=translator._translate_text,
        on_copy=translator._copy_text,
        on_count_label_created=translator._on_input_count_label_created,
    )
    on_change = mock_ui.textarea.call_args.kwargs['on_change']
    wrapper = mock_ui.element.return_value.classes.return_value
    wrapper_handlers = {c.args[0]: c.args[1] for c in wrapper.on.call_args_list}
    return on_change, wrapper_handlers


def js_event(**args):
    return SimpleNamespace(args=args)


class TestEventPayload:
    """Tests for event_payload()"""

    def test_dict_args(self):
        assert event_payload(js_event(value="x")) == {"value": "x"}

    def test_single_item_list(self):
        assert event_payload(SimpleNamespace(args=[{"value": "x"}])) == {"value": "x"}

    def test_missing_args(self):
        assert event_payload(SimpleNamespace()) == {}


class TestSourcePanel:
    """Source textarea driven through its value-change and composition events"""

    @pytest.mark.asyncio
    async def test_value_change_updates_text_and_arms(self, translator, mock_ui):
        on_change, _ = build_panel(translator, mock_ui)

        on_change(SimpleNamespace(value="Hello"))

        assert translator.state.source.content == "Hello"
        assert translator.state.input_char_count == 5
        assert translator.scheduler.armed is True
        count_label = mock_ui.label.return_value.classes.return_value
        count_label.set_text.assert_called_with("Characters: 5")

    @pytest.mark.asyncio
    async def test_none_value_treated_as_empty(self, translator, mock_ui):
        on_change, _ = build_panel(translator, mock_ui)
        on_change(SimpleNamespace(value=None))
        assert translator.state.source.content == ""
        assert translator.scheduler.armed is False

    def test_input_and_composition_listeners_not_on_textarea(self, translator, mock_ui):
        build_panel(translator, mock_ui)
        textarea = mock_ui.textarea.return_value.classes.return_value.props.return_value
        events = [c.args[0] for c in textarea.on.call_args_list]
        assert events == ['keydown']

    @pytest.mark.asyncio
    async def test_composition_events_commit_once(self, translator, mock_ui):
        on_change, handlers = build_panel(translator, mock_ui)
        assert set(handlers) == {'compositionstart', 'input', 'compositionend'}
        commits = MagicMock(wraps=translator.tracker._on_commit)
        translator.tracker._on_commit = commits

        handlers['compositionstart'](js_event(value=""))
        handlers['input'](js_event(value="ni"))
        assert translator.state.source.content == "ni"
        assert translator.scheduler.armed is False

        # The model value is released right before compositionend
        on_change(SimpleNamespace(value="你好"))
        assert translator.scheduler.armed is False

        handlers['compositionend'](js_event(value="你好"))
        commits.assert_called_once_with("你好")
        assert translator.state.source.content == "你好"
        assert translator.scheduler.armed is True
