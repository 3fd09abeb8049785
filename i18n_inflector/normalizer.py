"""
Locale normalization for i18n_inflector

Reduces a caller-supplied locale tag ("en-US", "EN_us", "pt_BR") to the
two-letter ISO 639-1 code used as the registry key.

License: Apache 2.0
"""

# Maximum length of an ISO 639-1 language code, in bytes
MAX_LANGUAGE_CODE_LENGTH = 2

# Region/script subtag separators
_SEPARATORS = (ord("-"), ord("_"))


def normalize_locale(locale: str) -> str:
    """
    Normalize a locale tag to a two-letter language code.

    The UTF-8 bytes of the tag are scanned left to right. Scanning stops at
    the first '-' or '_' separator, or once two bytes have been kept. ASCII
    letters are folded to lowercase; other bytes pass through unchanged.
    If the cut splits a multi-byte character, the incomplete tail is
    dropped so the result is always valid text.

    Never fails: empty or malformed input produces an empty or partial
    code, and rejecting unknown codes is left to the registry lookup.

    Args:
        locale: Locale tag in any case or format

    Returns:
        Normalized code of at most two bytes

    Example:
        >>> normalize_locale('EN-US')
        'en'
        >>> normalize_locale('pt_BR')
        'pt'
        >>> normalize_locale('ük')
        'ü'
    """
    kept = bytearray()
    for byte in locale.encode("utf-8", errors="surrogatepass"):
        if byte in _SEPARATORS or len(kept) == MAX_LANGUAGE_CODE_LENGTH:
            break
        kept.append(byte)

    # bytes.lower() only folds ASCII letters
    return bytes(kept).lower().decode("utf-8", errors="ignore")
