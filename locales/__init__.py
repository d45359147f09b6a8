"""
i18n module: dict-based translation with fallback to Chinese.
"""

from locales.zh import ZH_STRINGS
from locales.en import EN_STRINGS

DEFAULT_LANG = "zh"

_STRINGS = {"zh": ZH_STRINGS, "en": EN_STRINGS}


def t(key: str, lang: str = DEFAULT_LANG, **kwargs) -> str:
    """Get translated string. Falls back to ZH if key missing."""
    strings = _STRINGS.get(lang, _STRINGS[DEFAULT_LANG])
    text = strings.get(key, _STRINGS[DEFAULT_LANG].get(key, key))
    return text.format(**kwargs) if kwargs else text
