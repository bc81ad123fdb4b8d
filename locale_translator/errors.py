"""Translation failure taxonomy.

Providers raise these internally and convert every one of them into the
"return the original text" fallback at their public boundary.
"""


class TranslationError(RuntimeError):
    """Base class for translation failures."""


class ConfigurationError(TranslationError):
    """Credentials are missing or still set to placeholder values."""


class TransportError(TranslationError):
    """Timeout, connection failure or non-2xx HTTP status."""


class ProtocolError(TranslationError):
    """Response body does not match the expected envelope."""


class ProviderError(TranslationError):
    """The provider answered with an explicit error code and message."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message
