"""Language tag normalization and the Tencent TMT code table."""

# Caller locale tag (lower-cased) -> Tencent TMT language code
TENCENT_LANGUAGE_CODES: dict[str, str] = {
    "en": "en",
    "zh": "zh",
    "zh-cn": "zh",
    "zh-hans": "zh",
    "zh-tw": "zh-TW",
    "zh-hant": "zh-TW",
    "ja": "ja",
    "ko": "ko",
    "fr": "fr",
    "es": "es",
    "de": "de",
    "it": "it",
    "ru": "ru",
    "pt": "pt",
    "ar": "ar",
    "hi": "hi",
    "th": "th",
    "vi": "vi",
}


def normalize_tag(tag: str) -> str:
    """Lower-case a language tag and use '-' as the subtag separator."""
    return tag.strip().replace("_", "-").lower()


def to_tencent_code(tag: str) -> str:
    """Map a locale tag to the code TMT accepts.

    Lookup is case-insensitive. Unknown tags are returned unchanged so the
    provider rejects them explicitly instead of us guessing.
    """
    return TENCENT_LANGUAGE_CODES.get(normalize_tag(tag), tag)
