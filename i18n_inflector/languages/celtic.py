"""
Celtic inflection rules: Irish, Welsh and Breton.
"""

from i18n_inflector.suffixes import SuffixTable

# Also Scottish Gaelic and Manx
IRISH = SuffixTable(singular=("i", "a"), plural=("i", "a"))

# "iau" must be tried before "au": cathod -> cath, but "iau" alone -> "i"
WELSH = SuffixTable(
    singular=("iau", "au", "oedd", "od"),
    plural=("iau", "au", "oedd", "od"),
)

BRETON = SuffixTable(singular=("iou", "ou", "ed"), plural=("iou", "ou", "ed"))
