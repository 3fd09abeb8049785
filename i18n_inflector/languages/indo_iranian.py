"""
Indo-Aryan and Iranian inflection rules: Hindi, Bengali, Gujarati,
Persian, Kurdish and Pashto.

Words are handled in Latin transliteration, except that Bengali also
recognizes its native-script plural markers.
"""

from i18n_inflector.suffixes import SuffixTable

# Also Marathi, Nepali, Punjabi, Urdu and others
HINDI = SuffixTable(singular=("on", "en"), plural=("on", "en"))

BENGALI_NATIVE_SUFFIXES = ("গুলি", "গুলো", "সমূহ", "দের", "রা")

BENGALI = SuffixTable(
    singular=BENGALI_NATIVE_SUFFIXES + ("on", "en"),
    plural=("on", "en") + BENGALI_NATIVE_SUFFIXES,
)

GUJARATI = SuffixTable(singular=("on", "o"), plural=("o", "on"))

# Also Ossetian and Tajik
PERSIAN = SuffixTable(singular=("ha", "an"), plural=("ha", "an"))

KURDISH = SuffixTable(singular=("an", "en"), plural=("an", "en"))

PASHTO = SuffixTable(singular=("una", "an"), plural=("una", "an"))
