# -*- coding: utf-8 -*-
"""
Internationalization (i18n) module for Time Manager.

This module provides translation functions, language management and
locale-aware formatting of month labels and money amounts.
Supports English, German and Portuguese with automatic system locale detection.
"""

import datetime
import locale
from decimal import Decimal
from typing import Callable, List, Optional
from PySide6.QtCore import QDate, QLocale

from timemanager.i18n.translations import TRANSLATIONS

# Supported languages
SUPPORTED_LANGUAGES = ["en", "de", "pt"]

_QT_LOCALES = {
    "en": (QLocale.Language.English, QLocale.Country.UnitedStates),
    "de": (QLocale.Language.German, QLocale.Country.Germany),
    "pt": (QLocale.Language.Portuguese, QLocale.Country.Brazil),
}

# Current language (default to English)
_current_language = "en"

# Callbacks to notify when language changes
_language_changed_callbacks: List[Callable[[str], None]] = []


def detect_system_language() -> str:
    """
    Detect the system language and return a supported language code.

    Returns:
        'de' or 'pt' if detected, 'en' otherwise.
    """
    try:
        system_locale = locale.getlocale()[0]
    except ValueError:
        return 'en'
    if system_locale:
        for lang in ('de', 'pt'):
            if system_locale.startswith(lang):
                return lang
    return 'en'


def get_language() -> str:
    """Get the current language code."""
    return _current_language


def set_language(lang: str) -> None:
    """
    Set the current UI language.

    Args:
        lang: Language code ('en', 'de', 'pt' or 'auto')
    """
    global _current_language
    if lang == 'auto':
        lang = detect_system_language()
    if lang not in SUPPORTED_LANGUAGES:
        lang = 'en'
    _current_language = lang

    # Update Qt Locale for dates and numbers
    QLocale.setDefault(qt_locale(lang))

    # Notify all registered callbacks
    for callback in list(_language_changed_callbacks):
        callback(lang)


def qt_locale(lang: Optional[str] = None) -> QLocale:
    """QLocale for a supported language code (current language by default)"""
    language, territory = _QT_LOCALES.get(lang or _current_language, _QT_LOCALES['en'])
    return QLocale(language, territory)


def tr(key: str, **kwargs) -> str:
    """
    Get the translated string for the given key.

    Args:
        key: Translation key (e.g., 'finance.income')
        **kwargs: Format arguments for string interpolation

    Returns:
        Translated string, or the key itself if not found.
    """
    translations = TRANSLATIONS.get(_current_language, TRANSLATIONS.get('en', {}))
    text = translations.get(key, key)

    # Apply format arguments if provided
    if kwargs:
        try:
            text = text.format(**kwargs)
        except (KeyError, ValueError):
            pass

    return text


def format_month(day: datetime.date, lang: Optional[str] = None) -> str:
    """Short month label such as 'Oct 2026'"""
    return qt_locale(lang).toString(QDate(day.year, day.month, 1), "MMM yyyy")


def format_money(amount: Decimal, currency: str = "BRL", lang: Optional[str] = None) -> str:
    """Locale currency string, e.g. 'R$ 1.234,50' for pt"""
    loc = qt_locale(lang)
    symbol = currency
    if loc.currencySymbol(QLocale.CurrencySymbolFormat.CurrencyIsoCode) == currency:
        symbol = loc.currencySymbol(QLocale.CurrencySymbolFormat.CurrencySymbol)
    return loc.toCurrencyString(float(amount), symbol, 2)


def on_language_changed(callback: Callable[[str], None]) -> None:
    """
    Register a callback to be notified when language changes.

    Args:
        callback: Function that takes the new language code as argument.
    """
    if callback not in _language_changed_callbacks:
        _language_changed_callbacks.append(callback)


def remove_language_callback(callback: Callable[[str], None]) -> None:
    """
    Remove a previously registered language change callback.

    Args:
        callback: The callback function to remove.
    """
    if callback in _language_changed_callbacks:
        _language_changed_callbacks.remove(callback)
