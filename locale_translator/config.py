"""Environment variable loading with defaults."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .envdefault first (base defaults), then .env (overrides)
_base_dir = Path(__file__).resolve().parent.parent
load_dotenv(_base_dir / ".envdefault")
load_dotenv(_base_dir / ".env", override=True)


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


# Provider
TRANSLATION_PROVIDER: str = os.environ.get("TRANSLATION_PROVIDER", "tencent")

# Tencent Cloud TMT
TENCENT_SECRET_ID: str = os.environ.get("TENCENT_SECRET_ID", "")
TENCENT_SECRET_KEY: str = os.environ.get("TENCENT_SECRET_KEY", "")
TENCENT_REGION: str = os.environ.get("TENCENT_REGION", "ap-beijing")
TENCENT_PROJECT_ID: int = int(os.environ.get("TENCENT_PROJECT_ID", "0"))
TENCENT_TIMEOUT: float = float(os.environ.get("TENCENT_TIMEOUT", "30"))

# Ollama
OLLAMA_ENDPOINT: str = os.environ.get("OLLAMA_ENDPOINT", "http://localhost:11434")
OLLAMA_MODEL: str = os.environ.get("OLLAMA_MODEL", "qwen2.5:7b")
OLLAMA_TIMEOUT: float = float(os.environ.get("OLLAMA_TIMEOUT", "30"))

# Batch run
SOURCE_LOCALE: str = os.environ.get("SOURCE_LOCALE", "zh-Hans")
TRANSLATION_DELAY: float = float(os.environ.get("TRANSLATION_DELAY", "0.3"))
OVERWRITE_EXISTING: bool = _as_bool(os.environ.get("OVERWRITE_EXISTING", "true"))

# Logging
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
