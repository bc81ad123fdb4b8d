from locale_translator.providers.echo import EchoProvider
from locale_translator.providers.ollama import OllamaProvider
from locale_translator.providers.tencent import TencentTranslateProvider

PROVIDERS: dict[str, type] = {
    "echo": EchoProvider,
    "ollama": OllamaProvider,
    "tencent": TencentTranslateProvider,
}


def load_provider(name: str, **kwargs):
    """Load a translation provider by name (case-insensitive)."""
    cls = PROVIDERS.get(name.strip().lower())
    if cls is None:
        raise ValueError(
            f"Unknown provider '{name}'. Available: {list(PROVIDERS.keys())}"
        )
    return cls(**kwargs)
