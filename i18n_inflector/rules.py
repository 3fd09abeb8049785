"""
Language rule contract for i18n_inflector

Standardizes the interface between the dispatch engine and the
per-language rule modules in ``i18n_inflector.languages``.

License: Apache 2.0
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import NamedTuple

SingularizeFn = Callable[[str], str]
PluralizeFn = Callable[[str], list[str]]


class LanguageRules:
    """
    Interface every language rule set satisfies.

    Implementations must be total: no word makes them raise. ``singularize``
    returns the word unchanged when no plural suffix applies, and
    ``pluralize`` always returns at least one candidate.
    """

    def language_code(self) -> str:
        """Return the ISO 639-1 code this rule set reports."""
        raise NotImplementedError("Subclasses must implement language_code()")

    def singularize(self, word: str) -> str:
        """
        Convert a potentially plural word to its singular form.

        Args:
            word: Word to singularize

        Returns:
            Best-guess singular form
        """
        raise NotImplementedError("Subclasses must implement singularize()")

    def pluralize(self, word: str) -> list[str]:
        """
        Generate plural candidates for a word.

        Args:
            word: Singular word

        Returns:
            Non-empty list of candidates, most likely first
        """
        raise NotImplementedError("Subclasses must implement pluralize()")


@dataclass(frozen=True)
class LanguageRuleSet(LanguageRules):
    """
    Rule set backed by a pair of plain functions.

    Delegating languages share another language's functions while keeping
    their own ``language``, so the reported code always matches the
    registry key.

    Example:
        >>> from i18n_inflector.languages import germanic
        >>> rules = LanguageRuleSet("lb", germanic.GERMAN.singularize, germanic.GERMAN.pluralize)
        >>> rules.language_code()
        'lb'
    """

    language: str
    singularize_fn: SingularizeFn
    pluralize_fn: PluralizeFn

    def language_code(self) -> str:
        return self.language

    def singularize(self, word: str) -> str:
        return self.singularize_fn(word)

    def pluralize(self, word: str) -> list[str]:
        return self.pluralize_fn(word)


class Inflection(NamedTuple):
    """
    Function pair implementing one language's rules.

    Rule modules expose one ``Inflection`` (or an object with the same two
    attributes) per language that defines its own logic; the registry
    binds them to language codes.
    """

    singularize: SingularizeFn
    pluralize: PluralizeFn
