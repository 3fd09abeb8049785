"""
Rule Registry for i18n_inflector

Maps every supported ISO 639-1 code to its rule set. Languages without
their own rules are bound directly to a related language's functions
(Luxembourgish to German, Kazakh to Turkish, ...) while still reporting
their own code.

The registry is built once at import time and exposed read-only, so it
can be shared between threads without locking.

Author: i18n_inflector Team
License: Apache 2.0
"""

from types import MappingProxyType

from i18n_inflector.languages import (
    afroasiatic,
    americas,
    baltic,
    bantu,
    celtic,
    dravidian,
    european,
    germanic,
    indo_iranian,
    invariant,
    romance,
    slavic,
    turkic,
    uralic,
)
from i18n_inflector.rules import LanguageRuleSet

# Canonical implementations: languages with their own rules
_CANONICAL = {
    "af": germanic.AFRIKAANS,
    "am": afroasiatic.AMHARIC,
    "ar": afroasiatic.ARABIC,
    "ay": americas.AYMARA,
    "bn": indo_iranian.BENGALI,
    "br": celtic.BRETON,
    "ca": romance.CATALAN,
    "cs": slavic.CZECH,
    "cy": celtic.WELSH,
    "da": germanic.DANISH,
    "de": germanic.GERMAN,
    "el": european.GREEK,
    "en": germanic.ENGLISH,
    "eo": european.ESPERANTO,
    "es": romance.SPANISH,
    "et": uralic.ESTONIAN,
    "eu": european.BASQUE,
    "fa": indo_iranian.PERSIAN,
    "fi": uralic.FINNISH,
    "fr": romance.FRENCH,
    "ga": celtic.IRISH,
    "gn": americas.GUARANI,
    "gu": indo_iranian.GUJARATI,
    "ha": afroasiatic.HAUSA,
    "hi": indo_iranian.HINDI,
    "hr": slavic.CROATIAN,
    "hu": uralic.HUNGARIAN,
    "hy": european.ARMENIAN,
    "is": germanic.ICELANDIC,
    "it": romance.ITALIAN,
    "ja": invariant.JAPANESE,
    "kn": dravidian.KANNADA,
    "ku": indo_iranian.KURDISH,
    "la": romance.LATIN,
    "lt": baltic.LITHUANIAN,
    "lv": baltic.LATVIAN,
    "ml": dravidian.MALAYALAM,
    "mn": turkic.MONGOLIAN,
    "mt": afroasiatic.MALTESE,
    "nl": germanic.DUTCH,
    "pl": slavic.POLISH,
    "ps": indo_iranian.PASHTO,
    "pt": romance.PORTUGUESE,
    "qu": americas.QUECHUA,
    "ro": romance.ROMANIAN,
    "ru": slavic.RUSSIAN,
    "so": afroasiatic.SOMALI,
    "sq": european.ALBANIAN,
    "sw": bantu.SWAHILI,
    "ta": dravidian.TAMIL,
    "te": dravidian.TELUGU,
    "tr": turkic.TURKISH,
    "uk": slavic.UKRAINIAN,
    "zu": bantu.ZULU,
}

# Canonical code -> codes bound to its functions
DELEGATIONS: dict[str, tuple[str, ...]] = {
    # No plural marking on nouns
    "ja": (
        "aa", "ab", "ae", "ak", "av", "bi", "bm", "bo", "ce", "ch", "cu", "dz",
        "ee", "ff", "fj", "ho", "ht", "id", "ig", "ii", "ik", "iu", "jv", "ka",
        "km", "ko", "kv", "lo", "mg", "mi", "ms", "my", "nv", "oj", "pi", "sa",
        "se", "sg", "sm", "su", "th", "tl", "vi", "wo", "yo", "zh",
    ),
    "tr": ("az", "ba", "cv", "kk", "ky", "tk", "tt", "ug", "uz"),
    "es": ("an",),
    "pt": ("gl",),
    "it": ("co", "sc"),
    "fr": ("ia", "ie", "oc", "rm", "wa"),
    "de": ("lb",),
    "nl": ("fy", "li"),
    "da": ("nb", "nn", "no", "sv"),
    "is": ("fo",),
    "uk": ("be",),
    "cs": ("sk",),
    "hr": ("bg", "bs", "mk", "sl", "sr"),
    "ga": ("gd", "gv"),
    "cy": ("kw",),
    "ar": ("he", "yi"),
    "am": ("ti",),
    "so": ("om",),
    "fa": ("os", "tg"),
    "hi": ("as", "dv", "mr", "ne", "or", "pa", "sd", "si", "ur"),
    "sw": ("kg", "ki", "kj", "lg", "lu", "ny", "rw", "sn"),
    "zu": ("nd", "nr", "ss", "st", "tn", "ts", "ve", "xh"),
}


def _build_registry() -> MappingProxyType:
    bindings = dict(_CANONICAL)
    for canonical, delegates in DELEGATIONS.items():
        for code in delegates:
            if code in bindings:
                raise ValueError(f"Language code '{code}' is bound twice")
            # Bind straight to the canonical functions, never to another entry
            bindings[code] = _CANONICAL[canonical]

    return MappingProxyType(
        {
            code: LanguageRuleSet(code, impl.singularize, impl.pluralize)
            for code, impl in sorted(bindings.items())
        }
    )


RULES = _build_registry()


def lookup(code: str) -> LanguageRuleSet | None:
    """
    Look up the rule set for a normalized language code.

    Args:
        code: Two-letter lowercase language code

    Returns:
        The rule set, or None if the code is not registered

    Example:
        >>> lookup('lb').language_code()
        'lb'
        >>> lookup('xx') is None
        True
    """
    return RULES.get(code)


def supported_languages() -> tuple[str, ...]:
    """Return every registered language code, sorted."""
    return tuple(RULES)
