"""
Romance inflection rules: Spanish, Portuguese, Catalan, French, Italian,
Romanian and Latin.
"""

from i18n_inflector.rules import Inflection
from i18n_inflector.suffixes import SuffixTable, ends_with_any, replace_first, strip_suffix


def _es_plural_rules(consonants: str) -> Inflection:
    """
    Build ``-s`` / ``-es`` rules where ``-es`` follows the given final letters.

    Spanish and Portuguese share this shape and differ only in which final
    letters take ``-es``.
    """

    def singularize(word: str) -> str:
        if word.endswith("es") and ends_with_any(word[:-2], consonants):
            return word[:-2]
        stem = strip_suffix(word, "s")
        return word if stem is None else stem

    def pluralize(word: str) -> list[str]:
        candidates = [word + "s"]
        if ends_with_any(word, consonants):
            candidates.append(word + "es")
        return candidates

    return Inflection(singularize, pluralize)


SPANISH = _es_plural_rules("drnlzjs")

PORTUGUESE = _es_plural_rules("rzlns")

_CATALAN_ES_FINALS = "rnlsz"


def _catalan_singularize(word: str) -> str:
    if word.endswith("es") and ends_with_any(word[:-2], _CATALAN_ES_FINALS):
        return word[:-2]
    stem = strip_suffix(word, "ns")
    if stem is not None:
        return stem
    stem = strip_suffix(word, "s")
    return word if stem is None else stem


def _catalan_pluralize(word: str) -> list[str]:
    candidates = [word + "s"]
    if ends_with_any(word, _CATALAN_ES_FINALS):
        candidates.append(word + "es")
    candidates.append(word + "ns")
    return candidates


CATALAN = Inflection(_catalan_singularize, _catalan_pluralize)


def _french_singularize(word: str) -> str:
    """
    Singularize a French noun.

    ``-aux`` becomes ``-al`` (journaux -> journal); otherwise a final
    ``-s`` is dropped.
    """
    stem = strip_suffix(word, "aux")
    if stem is not None:
        return stem + "al"
    stem = strip_suffix(word, "s")
    return word if stem is None else stem


def _french_pluralize(word: str) -> list[str]:
    candidates = [word + "s"]
    if word.endswith("al"):
        candidates.append(word[:-2] + "aux")
    return candidates


FRENCH = Inflection(_french_singularize, _french_pluralize)


def _italian_singularize(word: str) -> str:
    return replace_first(word, (("i", "o"), ("e", "a")))


def _italian_pluralize(word: str) -> list[str]:
    """
    Generate Italian plural candidates.

    Masculine ``-o`` and ``-e`` nouns take ``-i``. Feminine ``-a`` nouns
    usually take ``-e`` but some take ``-i``, so both are offered.
    """
    stem = strip_suffix(word, "o")
    if stem is not None:
        return [stem + "i"]
    stem = strip_suffix(word, "a")
    if stem is not None:
        return [stem + "e", stem + "i"]
    stem = strip_suffix(word, "e")
    if stem is not None:
        return [stem + "i"]
    return [word + "i"]


ITALIAN = Inflection(_italian_singularize, _italian_pluralize)

ROMANIAN = SuffixTable(singular=("uri", "i", "e"), plural=("i", "e", "uri"))

# (plural ending, singular ending) by declension
_LATIN_ENDINGS = (("ae", "a"), ("i", "us"), ("es", "is"), ("a", "um"))


def _latin_singularize(word: str) -> str:
    return replace_first(word, _LATIN_ENDINGS)


def _latin_pluralize(word: str) -> list[str]:
    for plural_ending, singular_ending in (("i", "us"), ("ae", "a"), ("a", "um"), ("es", "is")):
        stem = strip_suffix(word, singular_ending)
        if stem is not None:
            return [stem + plural_ending]
    return [word + "es"]


LATIN = Inflection(_latin_singularize, _latin_pluralize)
