"""
Baltic inflection rules: Lithuanian and Latvian.
"""

from i18n_inflector.rules import Inflection
from i18n_inflector.suffixes import replace_first, strip_suffix


def _swap_or_append(word: str, swaps: tuple[tuple[str, str], ...], default: str) -> list[str]:
    # swaps are (singular ending, plural ending); first match wins
    for singular_ending, plural_ending in swaps:
        stem = strip_suffix(word, singular_ending)
        if stem is not None:
            return [stem + plural_ending]
    return [word + default]


_LITHUANIAN_PLURALS = (("ai", "as"), ("os", "a"), ("es", "e"))

LITHUANIAN = Inflection(
    lambda word: replace_first(word, _LITHUANIAN_PLURALS),
    lambda word: _swap_or_append(word, (("as", "ai"), ("a", "os"), ("e", "es")), "ai"),
)

_LATVIAN_PLURALS = (("i", "s"), ("as", "a"))

LATVIAN = Inflection(
    lambda word: replace_first(word, _LATVIAN_PLURALS),
    lambda word: _swap_or_append(word, (("s", "i"), ("a", "as")), "i"),
)
