"""
Custom exceptions for the inflection engine.
"""


class InflectorError(Exception):
    """Base exception for all i18n_inflector errors."""

    pass


class UnsupportedLocaleError(InflectorError):
    """
    Raised when a locale does not resolve to a registered language.

    Carries the locale exactly as the caller passed it, not the
    normalized code, so the message points at the real input.
    """

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"unsupported locale: {locale}")


class ConfigError(InflectorError):
    """Raised when the inflector configuration cannot be loaded."""

    pass
