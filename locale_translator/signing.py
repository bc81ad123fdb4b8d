"""TC3-HMAC-SHA256 request signing for Tencent Cloud APIs.

Pure functions: the caller supplies credentials, the request body and the
timestamp, and gets back the full header set for one request. Nothing here
touches the network or the clock.

The canonical request, credential scope and key-derivation chain are fixed
by the vendor protocol. Header names, their order, casing and every newline
are part of the signed material.
"""

import hashlib
import hmac
import logging
from dataclasses import dataclass
from datetime import datetime, timezone

logger = logging.getLogger(__name__)

ALGORITHM = "TC3-HMAC-SHA256"
CONTENT_TYPE = "application/json; charset=utf-8"
SIGNED_HEADERS = "content-type;host"
TERMINATOR = "tc3_request"

# Values shipped in sample configs; never valid credentials
PLACEHOLDER_SECRET_ID = "YOUR_SECRET_ID"
PLACEHOLDER_SECRET_KEY = "YOUR_SECRET_KEY"


@dataclass(frozen=True)
class Credentials:
    """API identity: secret id/key pair plus the region requests target."""

    secret_id: str
    secret_key: str
    region: str

    @property
    def is_configured(self) -> bool:
        """True when both secrets are set and are not placeholder values."""
        if not self.secret_id or self.secret_id == PLACEHOLDER_SECRET_ID:
            return False
        if not self.secret_key or self.secret_key == PLACEHOLDER_SECRET_KEY:
            return False
        return True

    def __repr__(self) -> str:
        return f"Credentials(secret_id={self.secret_id!r}, secret_key='***', region={self.region!r})"


@dataclass(frozen=True)
class SigningContext:
    """Everything one request signature is bound to.

    Args:
        service: Service name, e.g. "tmt".
        host: Endpoint host the request is sent to.
        action: API action, e.g. "TextTranslate".
        version: API version, e.g. "2018-03-21".
        region: Region sent in the X-TC-Region header.
        timestamp: Request time. Naive datetimes are taken as UTC.
        body: Exact body bytes that will be transmitted.
    """

    service: str
    host: str
    action: str
    version: str
    region: str
    timestamp: datetime
    body: bytes


def _utc(timestamp: datetime) -> datetime:
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc)


def _hmac_sha256(key: bytes, msg: str) -> bytes:
    return hmac.new(key, msg.encode("utf-8"), hashlib.sha256).digest()


def sha256_hex(data: bytes | str) -> str:
    """Lower-case hex SHA-256 of data (str is encoded as UTF-8)."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()


def canonical_headers(host: str) -> str:
    """Canonical header block: content-type then host, each newline-terminated."""
    return f"content-type:{CONTENT_TYPE}\nhost:{host}\n"


def canonical_request(
    host: str,
    body: bytes,
    method: str = "POST",
    uri: str = "/",
    query: str = "",
) -> str:
    """Build the canonical request string hashed in the first signing step."""
    return "\n".join(
        [
            method,
            uri,
            query,
            canonical_headers(host),
            SIGNED_HEADERS,
            sha256_hex(body),
        ]
    )


def credential_scope(datestamp: str, service: str) -> str:
    return f"{datestamp}/{service}/{TERMINATOR}"


def string_to_sign(request_timestamp: int, scope: str, canonical: str) -> str:
    return "\n".join([ALGORITHM, str(request_timestamp), scope, sha256_hex(canonical)])


def derive_signing_key(secret_key: str, datestamp: str, service: str) -> bytes:
    """Narrow the long-lived secret into the per-day, per-service signing key."""
    k_date = _hmac_sha256(("TC3" + secret_key).encode("utf-8"), datestamp)
    k_service = _hmac_sha256(k_date, service)
    return _hmac_sha256(k_service, TERMINATOR)


def sign(credentials: Credentials, context: SigningContext) -> dict[str, str]:
    """Sign one request and return the headers to send with it.

    Deterministic for identical inputs, including the timestamp. The
    returned headers are only valid for this body, host and second.
    """
    timestamp = _utc(context.timestamp)
    datestamp = timestamp.strftime("%Y-%m-%d")
    request_timestamp = int(timestamp.timestamp())

    canonical = canonical_request(context.host, context.body)
    scope = credential_scope(datestamp, context.service)
    to_sign = string_to_sign(request_timestamp, scope, canonical)
    logger.debug("[signing] canonical request:\n%s", canonical)
    logger.debug("[signing] string to sign:\n%s", to_sign)

    signing_key = derive_signing_key(credentials.secret_key, datestamp, context.service)
    signature = hmac.new(signing_key, to_sign.encode("utf-8"), hashlib.sha256).hexdigest()

    authorization = (
        f"{ALGORITHM} "
        f"Credential={credentials.secret_id}/{scope}, "
        f"SignedHeaders={SIGNED_HEADERS}, "
        f"Signature={signature}"
    )
    return {
        "Authorization": authorization,
        "Host": context.host,
        "Content-Type": CONTENT_TYPE,
        "X-TC-Timestamp": str(request_timestamp),
        "X-TC-Version": context.version,
        "X-TC-Action": context.action,
        "X-TC-Region": context.region,
    }
