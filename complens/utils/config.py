"""Config from environment. Load .env from project root before reading."""
import os
from pathlib import Path
from typing import Optional

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

# Load .env from project root (parent of complens/)
_env_path = PROJECT_ROOT / ".env"
if _env_path.exists():
    from dotenv import load_dotenv
    load_dotenv(_env_path)


def env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.environ.get(key, default)


# Alias dictionary
KEYWORDS_PATH: Path = Path(env("COMPLENS_KEYWORDS_PATH") or PROJECT_ROOT / "component-keywords.json")

# Reserved component-library namespace
RESERVED_PREFIX: str = env("COMPLENS_RESERVED_PREFIX") or "cfa"
RESERVED_NAMESPACE: str = env("COMPLENS_RESERVED_NAMESPACE") or "cfa-web-components"

# Model fallback (Ollama)
OLLAMA_BASE_URL: str = env("COMPLENS_OLLAMA_BASE_URL") or "http://localhost:11434"
OLLAMA_MODEL: str = env("COMPLENS_OLLAMA_MODEL") or "llama3.2"
PROBE_TIMEOUT: float = float(env("COMPLENS_PROBE_TIMEOUT") or "3.0")
GENERATE_TIMEOUT: float = float(env("COMPLENS_GENERATE_TIMEOUT") or "30.0")
NUM_PREDICT: int = min(100, int(env("COMPLENS_NUM_PREDICT") or "100"))

# Batch aggregation
BATCH_WORKERS: int = max(1, int(env("COMPLENS_BATCH_WORKERS") or "1"))

# API
API_HOST: str = env("COMPLENS_API_HOST") or "0.0.0.0"
API_PORT: int = int(env("COMPLENS_API_PORT") or "8000")
