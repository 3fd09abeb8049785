"""
Suffix helpers shared by the language rule modules.

Every helper enforces the non-empty-stem guard: a suffix is only stripped
when something is left in front of it, so a word that consists solely of a
suffix is returned unchanged.
"""

from dataclasses import dataclass


def strip_suffix(word: str, suffix: str) -> str | None:
    """
    Strip ``suffix`` from ``word`` if a non-empty stem remains.

    Args:
        word: Word to inspect
        suffix: Suffix to remove

    Returns:
        The stem, or None if the word does not end with the suffix or the
        stem would be empty

    Example:
        >>> strip_suffix('users', 's')
        'user'
        >>> strip_suffix('s', 's') is None
        True
    """
    if len(word) > len(suffix) and word.endswith(suffix):
        return word[: len(word) - len(suffix)]
    return None


def strip_first(word: str, suffixes: tuple[str, ...]) -> str:
    """Strip the first suffix, in table order, that leaves a non-empty stem."""
    for suffix in suffixes:
        stem = strip_suffix(word, suffix)
        if stem is not None:
            return stem
    return word


def replace_first(word: str, replacements: tuple[tuple[str, str], ...]) -> str:
    """
    Swap the first matching plural ending for its singular ending.

    Args:
        word: Word to singularize
        replacements: Ordered ``(plural_ending, singular_ending)`` pairs

    Returns:
        The rewritten word, or the word unchanged if nothing matched
    """
    for plural_ending, singular_ending in replacements:
        stem = strip_suffix(word, plural_ending)
        if stem is not None:
            return stem + singular_ending
    return word


def append_each(word: str, suffixes: tuple[str, ...]) -> list[str]:
    """Return ``word`` with each suffix appended, in table order."""
    return [word + suffix for suffix in suffixes]


def ends_with_any(word: str, endings: str) -> bool:
    """Check whether ``word`` ends with any single character in ``endings``."""
    return bool(word) and word[-1] in endings


@dataclass(frozen=True)
class SuffixTable:
    """
    Purely suffix-driven rules for one language.

    ``singular`` lists the plural suffixes to strip, checked in order (longer
    or more specific suffixes first). ``plural`` lists the suffixes appended
    to build candidates, in enumeration order.

    Example:
        >>> dutch = SuffixTable(singular=("en", "'s", "s"), plural=("en", "s", "'s"))
        >>> dutch.singularize('klanten')
        'klant'
        >>> dutch.pluralize('klant')
        ['klanten', 'klants', "klant's"]
    """

    singular: tuple[str, ...]
    plural: tuple[str, ...]

    def singularize(self, word: str) -> str:
        return strip_first(word, self.singular)

    def pluralize(self, word: str) -> list[str]:
        return append_each(word, self.plural)
