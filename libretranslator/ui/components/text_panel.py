# libretranslator/ui/components/text_panel.py
"""
Translator panels: language bar, source input and editable result.
"""

import logging
from typing import Any, Callable, Optional

from nicegui import ui

from libretranslator.models.types import SOURCE_LANGUAGES, TARGET_LANGUAGES
from libretranslator.services.locale import Locale
from libretranslator.ui.state import AppState

logger = logging.getLogger(__name__)

# QInput replaces input/composition listeners set on the component itself and
# holds its model value back during an IME composition. Committed text arrives
# through on_change; composition progress is read where the native events
# bubble to, on a wrapper element.
_VALUE_JS_HANDLER = '(e) => emit({value: e.target.value})'

# Only intermediate composition text; everything else reaches on_change
_COMPOSING_INPUT_JS_HANDLER = '(e) => { if (e.isComposing) emit({value: e.target.value}); }'


def event_payload(e: Any) -> dict:
    """Normalize the arguments of a js_handler event to a dict."""
    args = getattr(e, 'args', None)
    if isinstance(args, list) and len(args) == 1:
        args = args[0]
    return args if isinstance(args, dict) else {}


def create_language_bar(
    state: AppState,
    locale: Locale,
    on_source_lang_change: Callable[[str], None],
    on_target_lang_change: Callable[[str], None],
    on_swap: Callable[[], None],
) -> tuple[ui.select, ui.select]:
    """Source select, swap button and target select.

    Returns:
        (source_select, target_select) so the caller can reflect a swap
    """
    with ui.row().classes('language-selection items-center w-full no-wrap'):
        source_select = ui.select(
            options={code: locale.language_name(code) for code in SOURCE_LANGUAGES},
            value=state.source_lang,
            on_change=lambda e: on_source_lang_change(e.value),
        ).classes('flex-grow').props('outlined dense')
        ui.button('⇄', on_click=on_swap).classes('swap-button').props('flat')
        target_select = ui.select(
            options={code: locale.language_name(code) for code in TARGET_LANGUAGES},
            value=state.target_lang,
            on_change=lambda e: on_target_lang_change(e.value),
        ).classes('flex-grow').props('outlined dense')
    return source_select, target_select


def create_source_panel(
    state: AppState,
    locale: Locale,
    on_source_change: Callable[[str], None],
    on_composition_start: Callable[[str], None],
    on_composition_update: Callable[[str], None],
    on_composition_end: Callable[[str], None],
    on_translate: Callable[[], Any],
    on_copy: Callable[[str], Any],
    on_count_label_created: Optional[Callable[[ui.label], None]] = None,
) -> ui.textarea:
    """Source textarea wired to the input tracker callbacks.

    Typing and paste arrive as model value changes; composition start,
    progress and end are reported separately. Ctrl/Cmd+Enter translates
    immediately.
    """
    with ui.column().classes('input-text-area w-full'):
        wrapper = ui.element('div').classes('w-full')
        with wrapper:
            textarea = ui.textarea(
                placeholder=locale.t('inputPlaceholder'),
                value=state.source.content,
                on_change=lambda e: on_source_change(e.value or ''),
            ).classes('w-full').props('outlined rows=10 aria-label="source text"')

        wrapper.on(
            'compositionstart',
            lambda e: on_composition_start(event_payload(e).get('value', '')),
            js_handler=_VALUE_JS_HANDLER,
        )
        wrapper.on(
            'input',
            lambda e: on_composition_update(event_payload(e).get('value', '')),
            js_handler=_COMPOSING_INPUT_JS_HANDLER,
        )
        wrapper.on(
            'compositionend',
            lambda e: on_composition_end(event_payload(e).get('value', '')),
            js_handler=_VALUE_JS_HANDLER,
        )

        async def handle_keydown(_e):
            if state.can_translate():
                try:
                    await on_translate()
                except Exception as ex:
                    logger.exception("Ctrl+Enter translation error: %s", ex)

        textarea.on(
            'keydown',
            handle_keydown,
            js_handler='''(e) => {
                if ((e.ctrlKey || e.metaKey) && e.key === "Enter") {
                    e.preventDefault();
                    emit(e);
                }
            }'''
        )

        with ui.row().classes('info-bar w-full items-center justify-between'):
            count_label = ui.label(f"{locale.t('charCount')}: {state.input_char_count}").classes('char-count')
            ui.button(
                locale.t('copy'),
                on_click=lambda: on_copy(state.source.content),
            ).classes('copy-button').props('flat dense no-caps')

    if on_count_label_created:
        on_count_label_created(count_label)
    return textarea


def create_result_panel(
    state: AppState,
    locale: Locale,
    on_output_change: Callable[[str], None],
    on_copy: Callable[[str], Any],
    on_count_label_created: Optional[Callable[[ui.label], None]] = None,
) -> ui.textarea:
    """Editable result textarea with character count and copy button."""
    with ui.column().classes('output-text-area w-full'):
        textarea = ui.textarea(
            placeholder=locale.t('outputPlaceholder'),
            value=state.translated.content,
            on_change=lambda e: on_output_change(e.value or ''),
        ).classes('w-full').props('outlined rows=10 aria-label="translated text"')

        with ui.row().classes('info-bar w-full items-center justify-between'):
            count_label = ui.label(f"{locale.t('charCount')}: {state.output_char_count}").classes('char-count')
            ui.button(
                locale.t('copy'),
                on_click=lambda: on_copy(state.translated.content),
            ).classes('copy-button').props('flat dense no-caps')

    if on_count_label_created:
        on_count_label_created(count_label)
    return textarea
