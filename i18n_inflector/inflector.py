"""
Public API for i18n_inflector

Dispatches singularize/pluralize calls to the rule set registered for the
caller's locale. Locale tags are normalized first ("EN-US" -> "en"); an
unregistered language raises UnsupportedLocaleError rather than falling
back to another language.

Author: i18n_inflector Team
License: Apache 2.0
"""

import logging

from i18n_inflector import registry
from i18n_inflector.exceptions import UnsupportedLocaleError
from i18n_inflector.normalizer import normalize_locale
from i18n_inflector.rules import LanguageRuleSet

logger = logging.getLogger(__name__)


def language_rules(locale: str) -> LanguageRuleSet:
    """
    Get the rule set for a locale.

    Useful when inflecting many words in the same language: fetch the rule
    set once and call its methods directly.

    Args:
        locale: Locale tag (e.g., 'en', 'EN-US', 'pt_BR')

    Returns:
        Rule set registered for the locale's language

    Raises:
        UnsupportedLocaleError: If the language has no registered rules
    """
    code = normalize_locale(locale)
    rules = registry.lookup(code)
    if rules is None:
        logger.debug(f"No rules registered for locale '{locale}' (normalized: '{code}')")
        raise UnsupportedLocaleError(locale)

    logger.debug(f"Resolved locale '{locale}' to rules for '{code}'")
    return rules


def singularize(locale: str, word: str) -> str:
    """
    Convert a potentially plural word to its singular form.

    Args:
        locale: Locale tag
        word: Word to singularize

    Returns:
        Best-guess singular form; the word itself if no rule applies

    Raises:
        UnsupportedLocaleError: If the language has no registered rules

    Example:
        >>> singularize('en-US', 'users')
        'user'
        >>> singularize('en', 'children')
        'child'
    """
    return language_rules(locale).singularize(word)


def pluralize(locale: str, word: str) -> list[str]:
    """
    Generate plural candidates for a word.

    Args:
        locale: Locale tag
        word: Singular word

    Returns:
        Non-empty list of candidates, most likely first

    Raises:
        UnsupportedLocaleError: If the language has no registered rules

    Example:
        >>> pluralize('tr', 'araba')
        ['arabalar']
        >>> pluralize('ja', 'user')
        ['user']
    """
    return language_rules(locale).pluralize(word)


def is_supported(locale: str) -> bool:
    """Check whether a locale's language has registered rules."""
    return registry.lookup(normalize_locale(locale)) is not None


def supported_languages() -> tuple[str, ...]:
    """Return every supported language code, sorted."""
    return registry.supported_languages()
