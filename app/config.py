import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_KNOWLEDGE_BASE_PATH = Path(__file__).resolve().parent / "data" / "knowledge-base.txt"

# Load .env from the project root directory
load_dotenv(dotenv_path=PROJECT_ROOT / ".env")


@dataclass(frozen=True)
class Settings:
    llm_model: str
    llm_temperature: float
    knowledge_base_path: Path
    cors_allow_origins: tuple[str, ...]
    log_level: str


def load_settings() -> Settings:
    origins = os.getenv("CORS_ALLOW_ORIGINS", "*")
    return Settings(
        llm_model=os.getenv("LLM_MODEL", "gpt-4o-mini"),
        llm_temperature=float(os.getenv("LLM_TEMPERATURE", "0")),
        knowledge_base_path=Path(
            os.getenv("KNOWLEDGE_BASE_PATH", str(DEFAULT_KNOWLEDGE_BASE_PATH))
        ),
        cors_allow_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


# Only cache pure functions with hashable args
@lru_cache
def get_settings() -> Settings:
    return load_settings()
