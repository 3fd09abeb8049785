"""
i18n_inflector: rule-based noun singularization and pluralization for
ISO 639-1 languages.

Example:
    >>> import i18n_inflector
    >>> i18n_inflector.singularize('en-US', 'categories')
    'category'
    >>> i18n_inflector.pluralize('tr', 'ev')
    ['evler']
"""

from i18n_inflector.config import InflectorConfig, configure_logging, load_config
from i18n_inflector.exceptions import ConfigError, InflectorError, UnsupportedLocaleError
from i18n_inflector.inflector import (
    is_supported,
    language_rules,
    pluralize,
    singularize,
    supported_languages,
)
from i18n_inflector.normalizer import normalize_locale
from i18n_inflector.rules import LanguageRules, LanguageRuleSet

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "InflectorConfig",
    "InflectorError",
    "LanguageRuleSet",
    "LanguageRules",
    "UnsupportedLocaleError",
    "configure_logging",
    "is_supported",
    "language_rules",
    "load_config",
    "normalize_locale",
    "pluralize",
    "singularize",
    "supported_languages",
]
