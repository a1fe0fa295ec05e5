"""
Language registry: maps a language code to a ready converter.

Converters are built on first use and cached per distinct
``ConversionOptions`` (options are frozen, hence hashable). The cache size
comes from ``NUMWORDS_CACHE_SIZE``.

    get_converter(ConversionOptions(lang="ru", gender="feminine"))
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Callable

from .config import get_settings
from .core import CardinalConverter
from .exceptions import InvalidOptionsError, UnsupportedLocaleError
from .locales import (
    ar,
    bn,
    cs,
    da,
    de,
    en,
    es,
    fr,
    he,
    hi,
    hr,
    id,
    ja,
    ko,
    lt,
    lv,
    ms,
    nl,
    pl,
    pt,
    ro,
    ru,
    sr,
    sv,
    uk,
    ur,
    zh,
)
from .models import ConversionOptions

logger = logging.getLogger(__name__)

Builder = Callable[[ConversionOptions], CardinalConverter]

# ─── Language Table ──────────────────────────────────────────────────

LOCALES: dict[str, Builder] = {
    "ar": ar.build,
    "bn": bn.build,
    "cs": cs.build,
    "da": da.build,
    "de": de.build,
    "en": en.build,
    "es": es.build,
    "fr": fr.build,
    "fr-BE": fr.build,
    "he": he.build,
    "hi": hi.build,
    "hr": hr.build,
    "id": id.build,
    "ja": ja.build,
    "ko": ko.build,
    "lt": lt.build,
    "lv": lv.build,
    "ms": ms.build,
    "nl": nl.build,
    "pl": pl.build,
    "pt": pt.build,
    "ro": ro.build,
    "ru": ru.build,
    "sr": sr.build,
    "sr-Cyrl": sr.build,
    "sv": sv.build,
    "uk": uk.build,
    "ur": ur.build,
    "zh-Hans": zh.build,
    "zh-Hant": zh.build,
}


def supported_languages() -> list[str]:
    """All registered language codes, sorted."""
    return sorted(LOCALES)


# ─── Converter Cache ─────────────────────────────────────────────────


def _build(options: ConversionOptions) -> CardinalConverter:
    logger.debug("Building converter: %s", options.model_dump(exclude_defaults=True))
    return LOCALES[options.lang](options)


@lru_cache(maxsize=1)
def _converter_cache() -> Callable[[ConversionOptions], CardinalConverter]:
    return lru_cache(maxsize=get_settings().cache_size)(_build)


def clear_cache() -> None:
    """Drop every cached converter (and re-read the cache size on next use)."""
    _converter_cache.cache_clear()


def get_converter(options: ConversionOptions) -> CardinalConverter:
    """Return the converter for the options' language.

    Args:
        options: conversion options. ``lang=None`` selects the configured
            default language.

    Raises:
        InvalidOptionsError: ordinal output was requested.
        UnsupportedLocaleError: no converter is registered for the language.
    """
    if options.ordinal:
        raise InvalidOptionsError(
            "Ordinal numbers are not supported, only cardinals",
            {"ordinal": True},
        )

    lang = options.lang or get_settings().default_lang
    if lang not in LOCALES:
        raise UnsupportedLocaleError(lang, supported_languages())
    if lang != options.lang:
        options = options.model_copy(update={"lang": lang})

    return _converter_cache()(options)
