"""
Inflection rules for European languages outside the larger families:
Greek, Albanian, Armenian, Basque and Esperanto.
"""

from i18n_inflector.rules import Inflection
from i18n_inflector.suffixes import SuffixTable, strip_suffix


def _greek_singularize(word: str) -> str:
    stem = strip_suffix(word, "es")
    if stem is not None:
        return stem + "is"
    stem = strip_suffix(word, "a")
    return word if stem is None else stem


def _greek_pluralize(word: str) -> list[str]:
    candidates = []
    stem = strip_suffix(word, "is")
    if stem is not None:
        candidates.append(stem + "es")
    candidates.extend([word + "a", word + "es"])
    return candidates


GREEK = Inflection(_greek_singularize, _greek_pluralize)

ALBANIAN = SuffixTable(singular=("e", "a"), plural=("e", "a"))

ARMENIAN = SuffixTable(singular=("ner", "er"), plural=("ner", "er"))

BASQUE = SuffixTable(singular=("ak", "ek"), plural=("ak", "ek"))

ESPERANTO = SuffixTable(singular=("j",), plural=("j",))
