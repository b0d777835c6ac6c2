import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_WEBSITE_CONTENT_PATH = Path(__file__).resolve().parent / "data" / "website-content.txt"

load_dotenv(dotenv_path=Path(__file__).resolve().parent.parent / ".env")


@dataclass(frozen=True)
class ClientSettings:
    api_base_url: str
    website_content_path: Path
    request_timeout: float

    def load_website_content(self) -> str:
        return self.website_content_path.read_text(encoding="utf-8")


def load_client_settings() -> ClientSettings:
    return ClientSettings(
        api_base_url=os.getenv("API_BASE_URL", "http://localhost:8000").rstrip("/"),
        website_content_path=Path(
            os.getenv("WEBSITE_CONTENT_PATH", str(DEFAULT_WEBSITE_CONTENT_PATH))
        ),
        request_timeout=float(os.getenv("REQUEST_TIMEOUT", "30")),
    )
