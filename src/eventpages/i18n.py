from __future__ import annotations

from typing import List

from eventpages import config

# A locale is a short language code such as "hu" or "en".
Locale = str


def supported_locales() -> List[Locale]:
    locales = list(config.SUPPORTED_LOCALES)
    if config.DEFAULT_LOCALE not in locales:
        locales.insert(0, config.DEFAULT_LOCALE)
    return locales


def default_locale() -> Locale:
    return config.DEFAULT_LOCALE


def is_locale(value: str | None) -> bool:
    if not value:
        return False
    return value.lower() in supported_locales()
