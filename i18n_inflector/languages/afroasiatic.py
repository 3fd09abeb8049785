"""
Afro-Asiatic inflection rules: Arabic, Amharic, Hausa, Maltese and Somali.
"""

from i18n_inflector.suffixes import SuffixTable

# Sound plurals only; broken plurals are left alone. Also Hebrew and Yiddish.
ARABIC = SuffixTable(singular=("im", "ot", "at", "in"), plural=("im", "ot", "at", "in"))

# Also Tigrinya
AMHARIC = SuffixTable(singular=("och", "at"), plural=("och", "at"))

HAUSA = SuffixTable(singular=("una", "oci", "ai", "i"), plural=("una", "oci", "ai", "i"))

MALTESE = SuffixTable(singular=("ijiet", "i"), plural=("i", "ijiet"))

# Also Oromo
SOMALI = SuffixTable(singular=("oyin", "yo", "o"), plural=("oyin", "yo", "o"))
