"""Tencent Cloud TMT provider: TC3-signed TextTranslate calls over httpx."""

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

import httpx

from locale_translator import signing
from locale_translator.errors import (
    ConfigurationError,
    ProtocolError,
    ProviderError,
    TranslationError,
    TransportError,
)
from locale_translator.languages import to_tencent_code
from locale_translator.providers.base import TranslationProvider

logger = logging.getLogger(__name__)

SERVICE = "tmt"
ACTION = "TextTranslate"
VERSION = "2018-03-21"
DEFAULT_HOST = "tmt.tencentcloudapi.com"

REGION_HOSTS: dict[str, str] = {
    region: f"tmt.{region}.tencentcloudapi.com"
    for region in (
        "ap-guangzhou", "ap-shanghai", "ap-nanjing", "ap-beijing",
        "ap-chengdu", "ap-chongqing", "ap-hongkong", "ap-singapore",
        "ap-jakarta", "ap-bangkok", "ap-seoul", "ap-tokyo",
        "na-ashburn", "na-siliconvalley", "sa-saopaulo", "eu-frankfurt",
    )
}


@dataclass
class TranslationResult:
    """Success branch of a TextTranslate response."""

    text: str
    source: str | None = None
    target: str | None = None
    request_id: str | None = None


def resolve_host(region: str) -> str:
    """Region-specific API host, or the generic host for unknown regions."""
    return REGION_HOSTS.get(region, DEFAULT_HOST)


def build_request_body(text: str, target_code: str, project_id: int = 0) -> bytes:
    """Serialize the request envelope.

    The returned bytes are both hashed for the signature and sent as the
    body, so they must not be re-serialized in between.
    """
    payload = {
        "SourceText": text,
        "Source": "auto",
        "Target": target_code,
        "ProjectId": project_id,
    }
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def parse_envelope(data: Any) -> TranslationResult:
    """Extract the translation from a decoded response body.

    Raises:
        ProviderError: The response carries an error code/message.
        ProtocolError: The response carries neither branch, or both.
    """
    if not isinstance(data, dict):
        raise ProtocolError("response is not a JSON object")
    response = data.get("Response")
    if response is not None and not isinstance(response, dict):
        raise ProtocolError("'Response' is not an object")
    response = response or {}

    # Documented shape nests Error under Response; accept it top-level too
    error = data.get("Error") or response.get("Error")
    has_error = isinstance(error, dict) and bool(error)
    has_result = isinstance(response.get("TargetText"), str)

    if has_error and has_result:
        raise ProtocolError("response carries both a translation and an error")
    if has_error:
        raise ProviderError(str(error.get("Code", "")), str(error.get("Message", "")))
    if not has_result:
        raise ProtocolError("response carries neither a translation nor an error")

    return TranslationResult(
        text=response["TargetText"],
        source=response.get("Source"),
        target=response.get("Target"),
        request_id=response.get("RequestId"),
    )


def clean_translation(text: str) -> str:
    """Strip wrapping quotes/spaces and unescape quotes and newlines."""
    if not text:
        return text
    return text.strip("\"' ").replace('\\"', '"').replace("\\n", "\n")


class TencentTranslateProvider(TranslationProvider):
    """Translates text with Tencent Cloud Machine Translation.

    Each call signs a fresh request and opens its own HTTP client, so one
    instance can serve concurrent callers. Any failure returns the input
    text unchanged.

    Args:
        secret_id: API SecretId. Defaults to TENCENT_SECRET_ID.
        secret_key: API SecretKey. Defaults to TENCENT_SECRET_KEY.
        region: API region, e.g. "ap-beijing". Defaults to TENCENT_REGION.
        project_id: TMT project id. Defaults to TENCENT_PROJECT_ID.
        timeout: Request timeout in seconds. Defaults to TENCENT_TIMEOUT.
        transport: Optional httpx transport (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        secret_id: str | None = None,
        secret_key: str | None = None,
        region: str | None = None,
        project_id: int | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if None in (secret_id, secret_key, region, project_id, timeout):
            from locale_translator import config

            secret_id = config.TENCENT_SECRET_ID if secret_id is None else secret_id
            secret_key = config.TENCENT_SECRET_KEY if secret_key is None else secret_key
            region = config.TENCENT_REGION if region is None else region
            project_id = config.TENCENT_PROJECT_ID if project_id is None else project_id
            timeout = config.TENCENT_TIMEOUT if timeout is None else timeout

        self._credentials = signing.Credentials(secret_id, secret_key, region)
        self.project_id: int = project_id
        self.timeout: float = timeout
        self._transport = transport

    @property
    def credentials(self) -> signing.Credentials:
        return self._credentials

    @property
    def host(self) -> str:
        return resolve_host(self._credentials.region)

    def set_credentials(self, secret_id: str, secret_key: str, region: str | None = None) -> None:
        """Replace the identity. A blank region keeps the current one."""
        self._credentials = signing.Credentials(
            secret_id,
            secret_key,
            region or self._credentials.region,
        )

    async def translate(self, text: str, target_lang: str) -> str:
        try:
            result = await self._request(text, target_lang)
        except ConfigurationError as exc:
            logger.warning("[tencent] %s, returning text untranslated", exc)
            return text
        except ProviderError as exc:
            logger.error("[tencent] API error code=%s message=%s", exc.code, exc.message)
            return text
        except TranslationError as exc:
            logger.warning("[tencent] translation failed (%s): %s", type(exc).__name__, exc)
            return text
        except Exception:
            logger.exception("[tencent] unexpected error during translation")
            return text

        logger.debug(
            "[tencent] translated %d chars %s->%s request_id=%s",
            len(text), result.source, result.target, result.request_id,
        )
        return clean_translation(result.text)

    async def _request(self, text: str, target_lang: str) -> TranslationResult:
        credentials = self._credentials
        if not credentials.is_configured:
            raise ConfigurationError("Tencent Cloud credentials are not set")

        host = resolve_host(credentials.region)
        body = build_request_body(text, to_tencent_code(target_lang), self.project_id)
        headers = signing.sign(
            credentials,
            signing.SigningContext(
                service=SERVICE,
                host=host,
                action=ACTION,
                version=VERSION,
                region=credentials.region,
                timestamp=datetime.now(timezone.utc),
                body=body,
            ),
        )

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(f"https://{host}/", headers=headers, content=body)
        except httpx.HTTPError as exc:
            raise TransportError(f"request to {host} failed: {exc!r}") from exc

        if not response.is_success:
            raise TransportError(f"HTTP {response.status_code} {response.reason_phrase}")

        try:
            data = response.json()
        except ValueError as exc:
            raise ProtocolError("response body is not valid JSON") from exc
        return parse_envelope(data)
