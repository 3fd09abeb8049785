"""
Slavic inflection rules: Russian, Ukrainian, Polish, Czech and Croatian.

Words are handled in Latin transliteration.
"""

from i18n_inflector.rules import Inflection
from i18n_inflector.suffixes import SuffixTable, strip_suffix


def _east_slavic_singularize(word: str) -> str:
    stem = strip_suffix(word, "y")
    if stem is not None:
        return stem + "a"
    stem = strip_suffix(word, "i")
    return word if stem is None else stem


def _east_slavic_pluralize(word: str) -> list[str]:
    """
    Generate Russian/Ukrainian plural candidates.

    Feminine ``-a`` nouns swap the ending for ``-y`` or ``-i``; every word
    also gets the plain ``-y`` and ``-i`` forms.
    """
    candidates = []
    stem = strip_suffix(word, "a")
    if stem is not None:
        candidates.extend([stem + "y", stem + "i"])
    candidates.extend([word + "y", word + "i"])
    return candidates


RUSSIAN = Inflection(_east_slavic_singularize, _east_slavic_pluralize)

# Also Belarusian
UKRAINIAN = Inflection(_east_slavic_singularize, _east_slavic_pluralize)

POLISH = SuffixTable(singular=("y", "i"), plural=("y", "i"))

# Also Slovak
CZECH = SuffixTable(singular=("y", "e", "i"), plural=("y", "e", "i"))


def _croatian_singularize(word: str) -> str:
    """
    Singularize a South Slavic noun.

    Long plurals ``-ovi``/``-evi`` go first, then the palatalized ``-ci``
    which reverts to ``-k`` (korisnici -> korisnik), then ``-i`` and ``-a``.
    """
    for suffix in ("ovi", "evi"):
        stem = strip_suffix(word, suffix)
        if stem is not None:
            return stem
    stem = strip_suffix(word, "ci")
    if stem is not None:
        return stem + "k"
    for suffix in ("i", "a"):
        stem = strip_suffix(word, suffix)
        if stem is not None:
            return stem
    return word


def _croatian_pluralize(word: str) -> list[str]:
    candidates = [word + "i", word + "ovi", word + "evi"]
    stem = strip_suffix(word, "k")
    if stem is not None:
        candidates.append(stem + "ci")
    return candidates


CROATIAN = Inflection(_croatian_singularize, _croatian_pluralize)
