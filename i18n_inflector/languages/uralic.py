"""
Uralic inflection rules: Finnish, Estonian and Hungarian.
"""

from i18n_inflector.suffixes import SuffixTable

FINNISH = SuffixTable(singular=("t",), plural=("t",))

ESTONIAN = SuffixTable(singular=("d",), plural=("d",))

# Linking vowel varies with harmony; all three are offered
HUNGARIAN = SuffixTable(singular=("k",), plural=("k", "ok", "ek"))
