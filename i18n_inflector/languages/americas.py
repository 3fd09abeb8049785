"""
Inflection rules for indigenous languages of the Americas: Aymara,
Guarani and Quechua.
"""

from i18n_inflector.suffixes import SuffixTable

AYMARA = SuffixTable(singular=("naka",), plural=("naka",))

GUARANI = SuffixTable(singular=("kuéra",), plural=("kuéra",))

QUECHUA = SuffixTable(singular=("kuna",), plural=("kuna",))
