"""Ollama provider: local LLM translation via the /api/generate endpoint."""

import logging

import httpx

from locale_translator.prompts import get_translation_prompt
from locale_translator.providers.base import TranslationProvider

logger = logging.getLogger(__name__)

# Lead-ins models like to prepend to the answer
_RESULT_PREFIXES = ("以下是翻译结果：", "翻译结果：", "译文：", "Translation:")
_WRAPPING_CHARS = "\"'“”【】"


def clean_llm_output(raw: str) -> str:
    """Remove lead-in phrases and wrapping quotes/brackets from model output."""
    if not raw:
        return ""
    cleaned = raw
    for prefix in _RESULT_PREFIXES:
        cleaned = cleaned.replace(prefix, "")
    return cleaned.strip().strip(_WRAPPING_CHARS)


class OllamaProvider(TranslationProvider):
    """Translates text with a local model served by Ollama.

    No authentication. Any failure, or an empty answer, returns the input
    text unchanged.
    """

    def __init__(
        self,
        endpoint: str | None = None,
        model: str | None = None,
        source_lang: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        # Import here so tests can build the provider without a .env
        if None in (endpoint, model, source_lang, timeout):
            from locale_translator import config

            endpoint = config.OLLAMA_ENDPOINT if endpoint is None else endpoint
            model = config.OLLAMA_MODEL if model is None else model
            source_lang = config.SOURCE_LOCALE if source_lang is None else source_lang
            timeout = config.OLLAMA_TIMEOUT if timeout is None else timeout

        self.endpoint: str = endpoint.rstrip("/")
        self.model: str = model
        self.source_lang: str = source_lang
        self._client: httpx.AsyncClient = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def translate(self, text: str, target_lang: str) -> str:
        prompt = get_translation_prompt(text, target_lang, self.source_lang)
        payload = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
        }
        logger.debug("[ollama] prompt for %s:\n%s", target_lang, prompt)

        try:
            response = await self._client.post(f"{self.endpoint}/api/generate", json=payload)
            response.raise_for_status()
            data = response.json()
            answer = data.get("response") if isinstance(data, dict) else None
        except httpx.HTTPStatusError as exc:
            logger.error(
                "[ollama] API error: %s %s",
                exc.response.status_code,
                exc.response.reason_phrase,
            )
            return text
        except Exception:
            logger.exception("[ollama] request failed")
            return text

        translated = clean_llm_output(answer or "")
        if not translated:
            logger.warning("[ollama] empty answer for %d chars, returning text untranslated", len(text))
            return text
        return translated

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
