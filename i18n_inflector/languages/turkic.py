"""
Turkic and Mongolic inflection rules.

Turkish picks its plural suffix by vowel harmony: the last vowel of the
word decides between ``-lar`` (back vowels) and ``-ler`` (front vowels).
Words are often written without diacritics, in which case a bare ``i``
may stand for either the front ``i`` or the back ``ı``; both suffixes are
offered then, and also when the word has no vowel at all.

Author: i18n_inflector Team
License: Apache 2.0
"""

import logging

from i18n_inflector.rules import Inflection
from i18n_inflector.suffixes import SuffixTable, strip_first

logger = logging.getLogger(__name__)

BACK_VOWELS = frozenset("aıouâû")

# Dotted capital İ is unambiguous; str.lower() would expand it to i + U+0307
FRONT_VOWELS = frozenset("eöüîİ")

# Front "i" or back "ı" once diacritics are lost
AMBIGUOUS_VOWELS = frozenset("i")

BACK_SUFFIX = "lar"
FRONT_SUFFIX = "ler"


def last_vowel(word: str) -> str | None:
    """
    Find the last vowel of a word.

    Args:
        word: Word to scan

    Returns:
        The last vowel (lowercased, except a dotted capital İ), or None
        if the word has none
    """
    for char in reversed(word):
        if char not in FRONT_VOWELS:
            char = char.lower()
        if char in BACK_VOWELS or char in FRONT_VOWELS or char in AMBIGUOUS_VOWELS:
            return char
    return None


def _turkish_singularize(word: str) -> str:
    return strip_first(word, (BACK_SUFFIX, FRONT_SUFFIX))


def _turkish_pluralize(word: str) -> list[str]:
    """
    Generate Turkish plural candidates using vowel harmony.

    Example:
        >>> TURKISH.pluralize('araba')
        ['arabalar']
        >>> TURKISH.pluralize('ev')
        ['evler']
        >>> TURKISH.pluralize('kullanici')
        ['kullanicilar', 'kullaniciler']
    """
    vowel = last_vowel(word)
    if vowel in BACK_VOWELS:
        return [word + BACK_SUFFIX]
    if vowel in FRONT_VOWELS:
        return [word + FRONT_SUFFIX]

    logger.debug(f"No harmony evidence in {word!r} (last vowel: {vowel!r}), offering both suffixes")
    return [word + BACK_SUFFIX, word + FRONT_SUFFIX]


# Also Azerbaijani, Kazakh, Kyrgyz, Turkmen, Tatar, Uyghur, Uzbek and others
TURKISH = Inflection(_turkish_singularize, _turkish_pluralize)

MONGOLIAN = SuffixTable(singular=("nuud", "uud"), plural=("nuud", "uud"))
