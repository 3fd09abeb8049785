"""
Rules for languages that do not mark plurality on nouns.

Japanese is the canonical implementation; Chinese, Korean, Thai,
Vietnamese, Indonesian and several dozen other languages are bound to it.
"""

from i18n_inflector.rules import Inflection


def _unchanged(word: str) -> str:
    return word


def _single_candidate(word: str) -> list[str]:
    return [word]


JAPANESE = Inflection(_unchanged, _single_candidate)
