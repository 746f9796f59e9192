"""Dictionary-based UI string lookup for AKFLIX Player.

English strings are the keys; other languages live in ``src/utils/lang/<code>.py``
as a module-level ``STRINGS`` dict.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil

logger = logging.getLogger(__name__)

_DEFAULT_LANG = "en"

_current_strings: dict[str, str] = {}
_current_lang: str = _DEFAULT_LANG


def available_languages() -> list[str]:
    """'en' plus every module shipped under src.utils.lang."""
    from src.utils import lang

    codes = [m.name for m in pkgutil.iter_modules(lang.__path__) if not m.name.startswith("_")]
    return [_DEFAULT_LANG, *sorted(codes)]


def init_language(lang_code: str = _DEFAULT_LANG) -> str:
    """Activate *lang_code*; unknown codes fall back to English. Returns the active code."""
    global _current_strings, _current_lang
    code = (lang_code or _DEFAULT_LANG).strip().lower()
    if code == _DEFAULT_LANG:
        _current_strings, _current_lang = {}, _DEFAULT_LANG
        return _current_lang
    try:
        mod = importlib.import_module(f"src.utils.lang.{code}")
        strings = dict(mod.STRINGS)
    except (ImportError, AttributeError):
        logger.warning(f"UI language '{code}' not found, using English")
        _current_strings, _current_lang = {}, _DEFAULT_LANG
        return _current_lang
    _current_strings, _current_lang = strings, code
    return _current_lang


def tr(key: str) -> str:
    """Translate *key*; untranslated keys come back unchanged."""
    return _current_strings.get(key, key)


def current_language() -> str:
    return _current_lang
