"""HTTP client for the flow endpoints of the chat service.

Calls never raise for transport or server problems; they return ``Ok`` or
``Err`` so the UI can render a recoverable message instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Generic, TypeVar, Union

import requests

log = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    message: str


FlowResult = Union[Ok[T], Err]


class FlowClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 30,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http = session or requests.Session()

    def summarize(self, website_content: str) -> FlowResult[str]:
        result = self._post("summarize", {"websiteContent": website_content})
        if isinstance(result, Err):
            return result
        summary = result.value.get("websiteSummary")
        if not isinstance(summary, str):
            return Err("Response is missing 'websiteSummary'")
        return Ok(summary)

    def answer(self, question: str, website_content: str) -> FlowResult[str | None]:
        result = self._post(
            "answer", {"question": question, "websiteContent": website_content}
        )
        if isinstance(result, Err):
            return result
        # absent or null answers are left for the caller to replace
        answer = result.value.get("answer")
        if answer is not None and not isinstance(answer, str):
            return Err("Response field 'answer' is not a string")
        return Ok(answer)

    def _post(self, flow: str, payload: Dict[str, Any]) -> FlowResult[Dict[str, Any]]:
        url = f"{self.base_url}/flows/{flow}"
        try:
            r = self._http.post(
                url,
                json=payload,
                headers={"Content-Type": "application/json; charset=utf-8"},
                timeout=self.timeout,
            )
            r.raise_for_status()
            data = r.json()
        except requests.exceptions.JSONDecodeError as exc:
            log.warning("Flow %s returned invalid JSON: %s", flow, exc)
            return Err("Backend returned invalid JSON")
        except requests.RequestException as exc:
            log.warning("Flow %s failed: %s", flow, exc)
            return Err(f"Error talking to backend: {exc}")

        if not isinstance(data, dict):
            return Err("Backend returned an unexpected payload")
        return Ok(data)
