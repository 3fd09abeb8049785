"""
Bantu inflection rules: Swahili and Zulu.

Only suffix-based markers are handled; noun-class prefixes are not.
"""

from i18n_inflector.suffixes import SuffixTable

SWAHILI = SuffixTable(singular=("ni", "zi"), plural=("ni", "zi"))

# Also Xhosa, Ndebele, Swati, Sotho, Tswana, Tsonga and Venda
ZULU = SuffixTable(singular=("ni",), plural=("ini", "ni"))
