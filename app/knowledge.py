from pathlib import Path

from .exceptions import KnowledgeBaseError
from .logger import logger


class KnowledgeBase:
    """Static text merged into the site content before every answer."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def read(self) -> str:
        # read on every call so edits to the file apply without a restart
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Could not read knowledge base", path=str(self.path))
            raise KnowledgeBaseError(f"Could not read knowledge base at {self.path}") from exc
