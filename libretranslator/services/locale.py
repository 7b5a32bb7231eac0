# libretranslator/services/locale.py
"""
UI strings and language display names (English, Chinese, German).
"""

import logging
from typing import Optional

from libretranslator.models.types import AUTO_DETECT

logger = logging.getLogger(__name__)

DEFAULT_UI_LANGUAGE = "en"

UI_LANGUAGE_LABELS: dict[str, str] = {
    "en": "English",
    "zh": "中文",
    "de": "Deutsch",
}

STRINGS: dict[str, dict[str, str]] = {
    "en": {
        "Auto": "Detect language",
        "autoTranslate": "Auto translate",
        "charCount": "Characters",
        "copy": "Copy",
        "copyFailed": "Copy failed",
        "copySuccess": "Copied to clipboard",
        "enterPassword": "Enter password",
        "inputPlaceholder": "Enter text to translate",
        "outputPlaceholder": "Translation",
        "poweredBy": "Powered by DeepL-compatible API",
        "submit": "Submit",
        "translate": "Translate",
        "translating": "Translating...",
        "translationError": "Translation error, please try again later",
        "translationFailed": "Translation failed",
        "translationSuccess": "Translation succeeded",
        "wrongPassword": "Wrong password",
    },
    "zh": {
        "Auto": "自动检测",
        "autoTranslate": "自动翻译",
        "charCount": "字符数",
        "copy": "复制",
        "copyFailed": "复制失败",
        "copySuccess": "已复制到剪贴板",
        "enterPassword": "请输入密码",
        "inputPlaceholder": "请输入要翻译的文本",
        "outputPlaceholder": "翻译结果",
        "poweredBy": "由 DeepL 兼容接口提供支持",
        "submit": "提交",
        "translate": "翻译",
        "translating": "翻译中...",
        "translationError": "翻译出错，请稍后重试",
        "translationFailed": "翻译失败",
        "translationSuccess": "翻译成功",
        "wrongPassword": "密码错误",
    },
    "de": {
        "Auto": "Sprache erkennen",
        "autoTranslate": "Automatisch übersetzen",
        "charCount": "Zeichen",
        "copy": "Kopieren",
        "copyFailed": "Kopieren fehlgeschlagen",
        "copySuccess": "In die Zwischenablage kopiert",
        "enterPassword": "Passwort eingeben",
        "inputPlaceholder": "Text zum Übersetzen eingeben",
        "outputPlaceholder": "Übersetzung",
        "poweredBy": "Bereitgestellt über eine DeepL-kompatible API",
        "submit": "Senden",
        "translate": "Übersetzen",
        "translating": "Übersetze...",
        "translationError": "Übersetzungsfehler, bitte später erneut versuchen",
        "translationFailed": "Übersetzung fehlgeschlagen",
        "translationSuccess": "Übersetzung erfolgreich",
        "wrongPassword": "Falsches Passwort",
    },
}

# code -> (en, zh, de)
_LANGUAGE_NAMES: dict[str, tuple[str, str, str]] = {
    "ZH": ("Chinese", "中文", "Chinesisch"),
    "ZH-HANS": ("Chinese (simplified)", "简体中文", "Chinesisch (vereinfacht)"),
    "ZH-HANT": ("Chinese (traditional)", "繁体中文", "Chinesisch (traditionell)"),
    "AR": ("Arabic", "阿拉伯语", "Arabisch"),
    "BG": ("Bulgarian", "保加利亚语", "Bulgarisch"),
    "CS": ("Czech", "捷克语", "Tschechisch"),
    "DA": ("Danish", "丹麦语", "Dänisch"),
    "DE": ("German", "德语", "Deutsch"),
    "EL": ("Greek", "希腊语", "Griechisch"),
    "EN": ("English", "英语", "Englisch"),
    "EN-GB": ("English (British)", "英语（英国）", "Englisch (britisch)"),
    "EN-US": ("English (American)", "英语（美国）", "Englisch (amerikanisch)"),
    "ES": ("Spanish", "西班牙语", "Spanisch"),
    "ET": ("Estonian", "爱沙尼亚语", "Estnisch"),
    "FI": ("Finnish", "芬兰语", "Finnisch"),
    "FR": ("French", "法语", "Französisch"),
    "HU": ("Hungarian", "匈牙利语", "Ungarisch"),
    "ID": ("Indonesian", "印尼语", "Indonesisch"),
    "IT": ("Italian", "意大利语", "Italienisch"),
    "JA": ("Japanese", "日语", "Japanisch"),
    "KO": ("Korean", "韩语", "Koreanisch"),
    "LT": ("Lithuanian", "立陶宛语", "Litauisch"),
    "LV": ("Latvian", "拉脱维亚语", "Lettisch"),
    "NB": ("Norwegian (Bokmål)", "挪威语（书面）", "Norwegisch (Bokmål)"),
    "NL": ("Dutch", "荷兰语", "Niederländisch"),
    "PL": ("Polish", "波兰语", "Polnisch"),
    "PT": ("Portuguese", "葡萄牙语", "Portugiesisch"),
    "PT-BR": ("Portuguese (Brazilian)", "葡萄牙语（巴西）", "Portugiesisch (brasilianisch)"),
    "PT-PT": ("Portuguese (European)", "葡萄牙语（欧洲）", "Portugiesisch (europäisch)"),
    "RO": ("Romanian", "罗马尼亚语", "Rumänisch"),
    "RU": ("Russian", "俄语", "Russisch"),
    "SK": ("Slovak", "斯洛伐克语", "Slowakisch"),
    "SL": ("Slovenian", "斯洛文尼亚语", "Slowenisch"),
    "SV": ("Swedish", "瑞典语", "Schwedisch"),
    "TR": ("Turkish", "土耳其语", "Türkisch"),
    "UK": ("Ukrainian", "乌克兰语", "Ukrainisch"),
}

_NAME_COLUMN = {"en": 0, "zh": 1, "de": 2}


def detect_ui_language(accept_language: Optional[str]) -> str:
    """Pick a UI language from an Accept-Language header.

    Only the first (preferred) entry is considered; its primary subtag must
    be one of the supported UI languages, otherwise English is used.
    """
    if not accept_language:
        return DEFAULT_UI_LANGUAGE
    first = accept_language.split(",")[0].split(";")[0].strip()
    primary = first.split("-")[0].lower()
    if primary in STRINGS:
        return primary
    return DEFAULT_UI_LANGUAGE


class Locale:
    """Lookup of UI strings for one UI language."""

    def __init__(self, language: str = DEFAULT_UI_LANGUAGE) -> None:
        if language not in STRINGS:
            logger.debug("Unsupported UI language %r, using %s", language, DEFAULT_UI_LANGUAGE)
            language = DEFAULT_UI_LANGUAGE
        self.language = language

    def t(self, key: str) -> str:
        strings = STRINGS[self.language]
        if key in strings:
            return strings[key]
        return STRINGS[DEFAULT_UI_LANGUAGE].get(key, key)

    def language_name(self, code: str) -> str:
        """Display name of a language code (the auto-detect sentinel included)."""
        if code == AUTO_DETECT:
            return self.t("Auto")
        names = _LANGUAGE_NAMES.get(code)
        if names is None:
            return code
        return names[_NAME_COLUMN[self.language]]
