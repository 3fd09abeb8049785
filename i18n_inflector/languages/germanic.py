"""
Germanic inflection rules: English, German, Dutch, Danish, Icelandic and
Afrikaans.

English is the only language in the catalog with an irregular-form
exception list; it is consulted before any suffix rule.
"""

from i18n_inflector.rules import Inflection
from i18n_inflector.suffixes import SuffixTable, strip_suffix

# Singular -> plural; kept deliberately short
ENGLISH_IRREGULARS: dict[str, str] = {
    "child": "children",
    "person": "people",
    "man": "men",
    "woman": "women",
    "mouse": "mice",
    "goose": "geese",
    "tooth": "teeth",
    "foot": "feet",
    "ox": "oxen",
}

# Same form in singular and plural
ENGLISH_INVARIANTS = frozenset({"sheep", "deer", "fish", "series", "species", "aircraft"})

_ENGLISH_SINGULARS = {plural: singular for singular, plural in ENGLISH_IRREGULARS.items()}


def _english_singularize(word: str) -> str:
    """
    Convert a plural English noun to its singular form.

    Irregular plurals are looked up first. Regular handling covers
    ``-ies``, ``-sses``, ``-es`` after x/ch/sh/z, and plain ``-s``; words
    ending in ``-ss`` or ``-us`` are left alone. Exception lookups are
    case-sensitive: only lowercase irregulars are recognized.

    Example:
        >>> ENGLISH.singularize('categories')
        'category'
        >>> ENGLISH.singularize('children')
        'child'
    """
    if word in _ENGLISH_SINGULARS:
        return _ENGLISH_SINGULARS[word]
    if word in ENGLISH_INVARIANTS:
        return word

    stem = strip_suffix(word, "ies")
    if stem is not None:
        return stem + "y"
    stem = strip_suffix(word, "sses")
    if stem is not None:
        return stem + "ss"
    if word.endswith("es"):
        stem = word[:-2]
        if not stem:
            return word
        if stem.endswith(("x", "ch", "sh", "z")):
            return stem
        return word[:-1]
    stem = strip_suffix(word, "s")
    if stem is not None and not stem.endswith("s") and not word.endswith("us"):
        return stem
    return word


def _english_pluralize(word: str) -> list[str]:
    """Return ``-s``, ``-es`` and, after a final y, ``-ies`` candidates."""
    if word in ENGLISH_IRREGULARS:
        return [ENGLISH_IRREGULARS[word]]
    if word in ENGLISH_INVARIANTS:
        return [word]

    candidates = [word + "s", word + "es"]
    stem = strip_suffix(word, "y")
    if stem is not None:
        candidates.append(stem + "ies")
    return candidates


ENGLISH = Inflection(_english_singularize, _english_pluralize)

GERMAN = SuffixTable(
    singular=("en", "er", "e", "n", "s"),
    plural=("e", "en", "er", "n", "s"),
)

DUTCH = SuffixTable(singular=("en", "'s", "s"), plural=("en", "s", "'s"))

# Also Norwegian and Swedish
DANISH = SuffixTable(
    singular=("ere", "er", "ar", "or", "r"),
    plural=("ere", "er", "ar", "or", "r"),
)

ICELANDIC = SuffixTable(singular=("ar", "ir", "ur"), plural=("ar", "ir", "ur"))

AFRIKAANS = SuffixTable(singular=("e", "s"), plural=("e", "s"))
