"""Abstract translation provider interface."""

from abc import ABC, abstractmethod


class TranslationProvider(ABC):
    """Base class for all translation providers.

    Providers never raise to the caller for translation failures: on any
    error they log it and hand back the original text.
    """

    @abstractmethod
    async def translate(self, text: str, target_lang: str) -> str:
        """Translate text into target_lang.

        Args:
            text: Source text to translate.
            target_lang: Target locale tag (e.g. "en", "zh-TW", "ja").

        Returns:
            Translated text, or text unchanged if translation failed.
        """
        ...

    async def close(self) -> None:
        """Release provider resources. No-op by default."""
        return None
