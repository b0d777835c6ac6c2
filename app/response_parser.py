
from typing import Any, List

from langchain_core.messages import BaseMessage
from langchain_core.output_parsers import StrOutputParser


class ResponseParser(StrOutputParser):
    """Reduces a chat model reply to plain text."""

    def parse_result(self, result: List[BaseMessage], *, partial: bool = False) -> str:
        if not result:
            return ""
        content: Any = result[0].content
        if isinstance(content, list):
            # multi-part replies: keep the text blocks only
            content = "".join(
                part if isinstance(part, str) else part.get("text", "")
                for part in content
            )
        if not isinstance(content, str):
            content = str(content)
        return content
