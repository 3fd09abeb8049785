"""
Dravidian inflection rules: Tamil, Telugu, Kannada and Malayalam.
"""

from i18n_inflector.suffixes import SuffixTable

TAMIL = SuffixTable(singular=("kal", "gal"), plural=("kal", "gal"))

TELUGU = SuffixTable(singular=("lu",), plural=("lu",))

KANNADA = SuffixTable(singular=("galu",), plural=("galu",))

MALAYALAM = SuffixTable(singular=("kal",), plural=("kal",))
