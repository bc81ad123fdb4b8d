"""Echo provider: returns input text unchanged. For dry runs and tests."""

from locale_translator.providers.base import TranslationProvider


class EchoProvider(TranslationProvider):
    """Returns the input text unchanged, whatever the target language."""

    async def translate(self, text: str, target_lang: str) -> str:
        return text
