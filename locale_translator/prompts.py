"""Prompt templates for LLM-backed translation.

Templates are looked up by normalized target tag; anything without a
dedicated template uses DEFAULT_TEMPLATE.
"""

from locale_translator.languages import normalize_tag

# How a prompt spells out each language
LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "zh": "Chinese",
    "zh-cn": "Simplified Chinese",
    "zh-hans": "Simplified Chinese",
    "zh-tw": "Traditional Chinese",
    "zh-hant": "Traditional Chinese",
    "ja": "Japanese",
    "ko": "Korean",
    "fr": "French",
    "es": "Spanish",
    "de": "German",
    "it": "Italian",
    "ru": "Russian",
    "pt": "Portuguese",
    "ar": "Arabic",
    "hi": "Hindi",
    "th": "Thai",
    "vi": "Vietnamese",
}


KOREAN_TEMPLATE = (
    "Translate the following {source} text into Korean. "
    "Output pure Korean text only, without mixing in other languages.\n\n"
    "Source: {text}\n\n"
    "Requirements:\n"
    "- Use natural, spoken Korean\n"
    "- Output Korean only, nothing else\n"
    "- Do not add explanations or notes\n"
)

JAPANESE_TEMPLATE = (
    "Follow these steps:\n"
    "Step 1: Understand the meaning of the {source} sentence exactly\n"
    "Step 2: Rewrite it as natural, spoken Japanese\n"
    "Step 3: Use Japanese characters only (hiragana, katakana, kanji)\n"
    "Step 4: Output the final translation without any extra text\n"
    "Notes:\n"
    "- Questions must still read as questions\n"
    "- Avoid 「あなた」 unless it is required\n"
    "- Keep the dialogue natural and fluent\n"
    "Source: {text}\n"
)

ENGLISH_TEMPLATE = (
    "Translate the following {source} game dialogue into natural English.\n"
    "Requirements:\n"
    "1. Use natural, spoken English\n"
    "2. Keep the dialogue fluent and friendly\n"
    "3. Suitable for in-game character dialogue\n"
    "4. Return only the translation\n"
    "Text: {text}"
)

DEFAULT_TEMPLATE = (
    "Translate the following game dialogue text into {target}.\n"
    "Requirements:\n"
    "1. The translation reads naturally and suits game dialogue\n"
    "2. Keep a conversational tone\n"
    "3. Return only the translation, without any explanation\n"
    "Text: {text}"
)

PROMPT_TEMPLATES: dict[str, str] = {
    "ko": KOREAN_TEMPLATE,
    "ja": JAPANESE_TEMPLATE,
    "en": ENGLISH_TEMPLATE,
}

# Full language names some callers pass instead of tags
TAG_ALIASES: dict[str, str] = {
    "korean": "ko",
    "japanese": "ja",
    "english": "en",
}


def language_name(tag: str) -> str:
    """English name for a tag as written in prompts, or the tag itself."""
    return LANGUAGE_NAMES.get(normalize_tag(tag), tag)


def get_template(target_lang: str) -> str:
    """Return the prompt template for a target tag (case-insensitive)."""
    tag = normalize_tag(target_lang)
    tag = TAG_ALIASES.get(tag, tag)
    if tag not in PROMPT_TEMPLATES:
        # Regional variants share the template of their primary language
        tag = tag.split("-")[0]
    return PROMPT_TEMPLATES.get(tag, DEFAULT_TEMPLATE)


def get_translation_prompt(text: str, target_lang: str, source_lang: str = "zh") -> str:
    """Render the translation prompt for text."""
    return get_template(target_lang).format(
        text=text,
        source=language_name(source_lang),
        target=language_name(target_lang),
    )
