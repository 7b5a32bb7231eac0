# libretranslator/ui/app.py
from __future__ import annotations

"""
LibreTranslator - single-page translator UI.

Each browser session gets its own LibreTranslatorApp: input tracker,
debounce scheduler and request lifecycle are wired here and torn down when
the session's client disconnects.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from nicegui import Client, app as nicegui_app, ui
from starlette.requests import Request as StarletteRequest

from libretranslator.config.settings import AppSettings, get_default_settings_path
from libretranslator.models.types import TranslationJob, TransientMessage
from libretranslator.services.clipboard import ClipboardService
from libretranslator.services.debounce import DebounceScheduler
from libretranslator.services.exceptions import ClipboardError
from libretranslator.services.input_tracker import TextInputTracker
from libretranslator.services.locale import UI_LANGUAGE_LABELS, Locale, detect_ui_language
from libretranslator.services.messages import MessageBoard
from libretranslator.services.session_gate import SessionGate
from libretranslator.services.translation_client import TranslationClient
from libretranslator.services.translation_lifecycle import TranslationLifecycle
from libretranslator.ui.state import AppState

# Module logger
logger = logging.getLogger(__name__)

PROJECT_URL = "https://github.com/bestZwei/LibreTranslator"
CLIPBOARD_TIMEOUT_SEC = 2.0


class LibreTranslatorApp:
    """One UI session.

    Sections:
    1. Initialization - services wired to the session state
    2. Session lifecycle - client attach / teardown
    3. Input and translation - tracker, scheduler and lifecycle callbacks
    4. UI refresh - targeted updates without rebuilding the page
    5. UI creation - password screen and translator page
    """

    # =========================================================================
    # Section 1: Initialization
    # =========================================================================

    def __init__(
        self,
        settings: AppSettings,
        ui_language: str = "en",
        settings_path: Optional[Path] = None,
    ):
        self.settings = settings
        self.settings_path = settings_path or get_default_settings_path()
        self.state = AppState(
            source_lang=settings.source_lang,
            target_lang=settings.target_lang,
            auto_translate=settings.auto_translate,
            ui_language=ui_language,
        )
        self.locale = Locale(ui_language)

        self.messages = MessageBoard(settings.message_duration_ms, on_change=self._on_message_change)
        self.lifecycle = TranslationLifecycle(
            self.state,
            TranslationClient(settings),
            self.messages,
            self.locale,
            on_change=self._on_job_change,
        )
        self.scheduler = DebounceScheduler(
            callback=self._auto_translate,
            is_enabled=lambda: self.state.auto_translate,
            is_busy=lambda: self.lifecycle.is_pending,
            delay_ms=settings.debounce_delay_ms,
        )
        self.tracker = TextInputTracker(
            self.state.source,
            on_commit=self.scheduler.arm,
            on_clear=self.scheduler.cancel,
        )
        self.gate = SessionGate(self.state, settings.password, self.messages, self.locale)
        self.clipboard = ClipboardService(self._write_clipboard, self.messages, self.locale)

        # UI references for targeted refresh
        self._client: Optional[Client] = None
        self._main_content = None
        self._message_area = None
        self._translate_button: Optional[ui.button] = None
        self._result_textarea: Optional[ui.textarea] = None
        self._input_count_label: Optional[ui.label] = None
        self._output_count_label: Optional[ui.label] = None
        self._source_select: Optional[ui.select] = None
        self._target_select: Optional[ui.select] = None
        self._password_input: Optional[ui.input] = None

    # =========================================================================
    # Section 2: Session lifecycle
    # =========================================================================

    def attach(self, client: Client) -> None:
        self._client = client
        client.on_disconnect(self.close)

    def close(self) -> None:
        """Tear down timers so nothing fires against a closed page."""
        logger.debug("Closing translator session")
        self.scheduler.close()
        self.messages.close()
        self._client = None

    # =========================================================================
    # Section 3: Input and translation
    # =========================================================================

    def _on_source_change(self, value: str) -> None:
        # Typing and paste both arrive as a new model value
        self.tracker.on_input(value)
        self._refresh_input_count()

    def _on_composition_start(self, value: str) -> None:
        self.tracker.on_composition_start(value)
        self._refresh_input_count()

    def _on_composition_update(self, value: str) -> None:
        self.tracker.on_composition_update(value)
        self._refresh_input_count()

    def _on_composition_end(self, value: str) -> None:
        self.tracker.on_composition_end(value)
        self._refresh_input_count()

    def _on_output_change(self, value: str) -> None:
        self.state.set_translated_text(value)
        self._refresh_output_count()

    async def _auto_translate(self, text: str) -> None:
        await self.lifecycle.submit(text, self.state.source_lang, self.state.target_lang)

    async def _translate_text(self) -> None:
        await self.lifecycle.submit(self.state.source.content, self.state.source_lang, self.state.target_lang)

    async def _copy_text(self, text: str) -> None:
        await self.clipboard.copy(text)

    async def _write_clipboard(self, text: str) -> None:
        if self._client is None:
            raise ClipboardError("No browser client attached")
        result = await self._client.run_javascript(
            f'navigator.clipboard.writeText({json.dumps(text)}).then(() => true, () => false)',
            timeout=CLIPBOARD_TIMEOUT_SEC,
        )
        if result is not True:
            raise ClipboardError("Browser refused the clipboard write")

    def _on_auto_translate_toggle(self, enabled: bool) -> None:
        self.state.auto_translate = enabled
        if not enabled:
            self.scheduler.cancel()
        self.settings.auto_translate = enabled
        self._save_settings()

    def _on_source_lang_change(self, code: str) -> None:
        if code == self.state.source_lang:
            return
        self.state.set_source_lang(code)
        self.settings.source_lang = code
        self._save_settings()

    def _on_target_lang_change(self, code: str) -> None:
        if code == self.state.target_lang:
            return
        self.state.set_target_lang(code)
        self.settings.target_lang = code
        self._save_settings()

    def _swap_languages(self) -> None:
        if not self.state.swap_languages():
            return
        self.settings.source_lang = self.state.source_lang
        self.settings.target_lang = self.state.target_lang
        self._save_settings()
        if self._source_select is not None and self._target_select is not None:
            self._source_select.value = self.state.source_lang
            self._target_select.value = self.state.target_lang

    def _on_ui_language_change(self, language: str) -> None:
        self.state.ui_language = language
        self.locale = Locale(language)
        self.lifecycle.locale = self.locale
        self.gate.locale = self.locale
        self.clipboard.locale = self.locale
        self.settings.ui_language = language
        self._save_settings()
        self._refresh_content()

    def _submit_password(self) -> None:
        attempt = self._password_input.value if self._password_input is not None else ""
        if self.gate.unlock(attempt or ""):
            self._refresh_content()

    def _save_settings(self) -> None:
        try:
            self.settings.save(self.settings_path)
        except OSError as e:
            logger.warning("Failed to save settings: %s", e)

    # =========================================================================
    # Section 4: UI refresh
    # =========================================================================

    def _on_job_change(self, job: TranslationJob) -> None:
        if self._client is None:
            return
        with self._client:
            if job.result is not None and self._result_textarea is not None:
                self._result_textarea.value = self.state.translated.content
            self._refresh_output_count()
            self._refresh_translate_button()

    def _on_message_change(self, _message: Optional[TransientMessage]) -> None:
        if self._client is None or self._message_area is None:
            return
        with self._client:
            self._message_area.refresh()

    def _refresh_content(self) -> None:
        if self._main_content is not None:
            self._main_content.refresh()

    def _refresh_input_count(self) -> None:
        if self._input_count_label is not None:
            self._input_count_label.set_text(f"{self.locale.t('charCount')}: {self.state.input_char_count}")

    def _refresh_output_count(self) -> None:
        if self._output_count_label is not None:
            self._output_count_label.set_text(f"{self.locale.t('charCount')}: {self.state.output_char_count}")

    def _refresh_translate_button(self) -> None:
        button = self._translate_button
        if button is None:
            return
        if self.state.text_translating:
            button.set_text(self.locale.t('translating'))
            button.disable()
        else:
            button.set_text(self.locale.t('translate'))
            button.enable()

    def _on_input_count_label_created(self, label: ui.label) -> None:
        self._input_count_label = label

    def _on_output_count_label_created(self, label: ui.label) -> None:
        self._output_count_label = label

    # =========================================================================
    # Section 5: UI creation
    # =========================================================================

    def create_ui(self) -> None:
        from libretranslator.ui.styles import COMPLETE_CSS

        ui.add_head_html('<meta name="viewport" content="width=device-width, initial-scale=1.0">')
        ui.add_head_html(f'<style>{COMPLETE_CSS}</style>')

        @ui.refreshable
        def message_area():
            message = self.messages.current
            if message is None:
                return
            kind = 'error' if message.is_error else 'success'
            ui.label(message.text).classes(f'message {kind}')

        @ui.refreshable
        def main_content():
            with ui.column().classes('container w-full'):
                ui.label('LibreTranslator').classes('text-h4')
                if self.gate.is_open:
                    self._create_translator()
                else:
                    self._create_password_form()
                message_area()

        self._message_area = message_area
        self._main_content = main_content
        main_content()

    def _create_password_form(self) -> None:
        with ui.row().classes('password-container items-center'):
            self._password_input = ui.input(
                placeholder=self.locale.t('enterPassword'),
                password=True,
            ).on('keydown.enter', self._submit_password)
            ui.button(self.locale.t('submit'), on_click=self._submit_password)

    def _create_translator(self) -> None:
        from libretranslator.ui.components.text_panel import (
            create_language_bar,
            create_result_panel,
            create_source_panel,
        )

        with ui.row().classes('language-auto-translate w-full'):
            ui.select(
                options=UI_LANGUAGE_LABELS,
                value=self.state.ui_language,
                label='Lang',
                on_change=lambda e: self._on_ui_language_change(e.value),
            ).props('dense outlined').classes('language-switcher')
            ui.checkbox(
                self.locale.t('autoTranslate'),
                value=self.state.auto_translate,
                on_change=lambda e: self._on_auto_translate_toggle(bool(e.value)),
            ).classes('auto-translate')

        self._source_select, self._target_select = create_language_bar(
            state=self.state,
            locale=self.locale,
            on_source_lang_change=self._on_source_lang_change,
            on_target_lang_change=self._on_target_lang_change,
            on_swap=self._swap_languages,
        )

        with ui.element('div').classes('text-areas w-full'):
            create_source_panel(
                state=self.state,
                locale=self.locale,
                on_source_change=self._on_source_change,
                on_composition_start=self._on_composition_start,
                on_composition_update=self._on_composition_update,
                on_composition_end=self._on_composition_end,
                on_translate=self._translate_text,
                on_copy=self._copy_text,
                on_count_label_created=self._on_input_count_label_created,
            )
            self._result_textarea = create_result_panel(
                state=self.state,
                locale=self.locale,
                on_output_change=self._on_output_change,
                on_copy=self._copy_text,
                on_count_label_created=self._on_output_count_label_created,
            )

        with ui.row().classes('buttons w-full justify-center'):
            self._translate_button = ui.button(
                self.locale.t('translate'),
                on_click=self._translate_text,
            ).props('no-caps')
        self._refresh_translate_button()

        with ui.row().classes('footer'):
            ui.link('GitHub', PROJECT_URL, new_tab=True)
            ui.label(f"| {self.locale.t('poweredBy')}")


def create_app(
    settings: AppSettings,
    ui_language: str = "en",
    settings_path: Optional[Path] = None,
) -> LibreTranslatorApp:
    """Create a translator session"""
    return LibreTranslatorApp(settings, ui_language=ui_language, settings_path=settings_path)


def run_app(settings_path: Optional[Path] = None) -> None:
    """Run the NiceGUI server.

    Args:
        settings_path: Base settings path (defaults to config/settings.json)
    """
    settings_path = settings_path or get_default_settings_path()
    settings = AppSettings.load(settings_path)
    if not settings.api_url:
        logger.warning("No translation endpoint configured (set LIBRETRANSLATOR_API_URL)")
    if settings.gate_enabled:
        logger.info("Password gate enabled")

    # Live sessions, closed on server shutdown
    sessions: set[LibreTranslatorApp] = set()

    @ui.page('/')
    async def main_page(client: Client, request: StarletteRequest):
        page_settings = AppSettings.load(settings_path)
        ui_language = page_settings.ui_language or detect_ui_language(request.headers.get('accept-language'))
        translator = create_app(page_settings, ui_language=ui_language, settings_path=settings_path)
        translator.attach(client)
        sessions.add(translator)
        client.on_disconnect(lambda: sessions.discard(translator))
        translator.create_ui()

    def shutdown() -> None:
        logger.info("Shutting down LibreTranslator (%d open sessions)", len(sessions))
        for translator in list(sessions):
            translator.close()
        sessions.clear()

    nicegui_app.on_shutdown(shutdown)

    ui.run(
        host=settings.host,
        port=settings.port,
        title="LibreTranslator",
        native=settings.native,
        reload=False,
        show=False,
        uvicorn_logging_level='warning',
    )
