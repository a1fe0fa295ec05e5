"""
Custom exception hierarchy for number-to-words conversion.

Each exception type maps to a specific category of failure, carrying a
machine-readable code so callers (and the HTTP layer) can react precisely
without parsing messages.

Input errors additionally subclass the matching builtin (TypeError,
ValueError, LookupError) so generic handlers keep working.
"""

from __future__ import annotations


class NumWordsError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidTypeError(NumWordsError, TypeError):
    """The value is not an int, float, Decimal or numeral string."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_TYPE", message, details)


class InvalidFormatError(NumWordsError, ValueError):
    """The value is a string (or non-finite number) that is not a numeral."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_FORMAT", message, details)


class NotANumberError(NumWordsError, ValueError):
    """The value is IEEE NaN."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NOT_A_NUMBER", message, details)


class UnsupportedLocaleError(NumWordsError, LookupError):
    """No converter is registered for the requested language code."""

    def __init__(self, lang: str, supported: list[str]):
        message = (
            f"Unsupported language {lang!r}. "
            f"Supported languages: {', '.join(supported)}"
        )
        super().__init__(
            "UNSUPPORTED_LOCALE",
            message,
            {"lang": lang, "supported": list(supported)},
        )


class MissingVocabularyError(NumWordsError, LookupError):
    """An engine asked for a table entry the locale does not define."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("MISSING_VOCABULARY", message, details)


class InvalidOptionsError(NumWordsError, ValueError):
    """Conversion options failed validation."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_OPTIONS", message, details)


class LocaleDataError(NumWordsError):
    """Locale tables are inconsistent (detected when a converter is built)."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("LOCALE_DATA_INVALID", message, details)
