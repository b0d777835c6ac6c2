"""Conversation state for the chat widget, independent of the UI toolkit.

A session owns the append-only message list, the open/closed flag and the
summary readiness gate. The summary call runs on a background worker; its
result is picked up on the caller's thread the next time the gate is read,
so the message list is only ever mutated by the caller.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from concurrent.futures import wait as wait_futures
from dataclasses import dataclass
from typing import List, Literal, Tuple, Union

from client.flow_client import Err, FlowClient, FlowResult, Ok

log = logging.getLogger(__name__)

STILL_PROCESSING_TEXT = "Still processing the website. Please try again in a few seconds."
SUMMARY_FAILED_TEXT = (
    "Sorry, I couldn't load this website's content. Please reload the page and try again."
)
NO_ANSWER_TEXT = "No answer found."
ERROR_TEXT = "Something went wrong, please try again."

Sender = Literal["user", "bot"]


@dataclass(frozen=True)
class ConversationMessage:
    sender: Sender
    text: str


@dataclass(frozen=True)
class SummaryPending:
    pass


@dataclass(frozen=True)
class SummaryReady:
    summary: str


@dataclass(frozen=True)
class SummaryFailed:
    error: str


SummaryStatus = Union[SummaryPending, SummaryReady, SummaryFailed]


class ChatSession:
    def __init__(
        self,
        client: FlowClient,
        website_content: str,
        pool: Executor | None = None,
    ) -> None:
        self.client = client
        self.website_content = website_content
        self.is_open = False
        self._messages: List[ConversationMessage] = []
        self._pool = pool or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="site-chat-summary"
        )
        self._summary_future: Future | None = None
        self._summary: SummaryStatus = SummaryPending()

    # ------------------------------------------------------------------ #
    # state
    # ------------------------------------------------------------------ #
    @property
    def messages(self) -> Tuple[ConversationMessage, ...]:
        return tuple(self._messages)

    @property
    def summary(self) -> SummaryStatus:
        future = self._summary_future
        if isinstance(self._summary, SummaryPending) and future is not None and future.done():
            self._summary = self._resolve_summary(future)
        return self._summary

    def toggle(self) -> bool:
        self.is_open = not self.is_open
        return self.is_open

    # ------------------------------------------------------------------ #
    # summary gate
    # ------------------------------------------------------------------ #
    def start(self) -> None:
        """Request the website summary. Only the first call has an effect."""
        if self._summary_future is None:
            self._summary_future = self._pool.submit(
                self.client.summarize, self.website_content
            )

    def wait_for_summary(self, timeout: float | None = None) -> SummaryStatus:
        self.start()
        wait_futures([self._summary_future], timeout=timeout)
        return self.summary

    @staticmethod
    def _resolve_summary(future: Future) -> SummaryStatus:
        try:
            result: FlowResult[str] = future.result()
        except Exception as exc:  # noqa: BLE001
            log.exception("Summary request raised")
            return SummaryFailed(f"{type(exc).__name__}: {exc}")

        if isinstance(result, Ok):
            if not result.value:
                # an empty summary keeps the gate closed
                log.warning("Summary request returned an empty summary")
                return SummaryFailed("Empty website summary")
            return SummaryReady(result.value)
        log.warning("Summary request failed: %s", result.message)
        return SummaryFailed(result.message)

    # ------------------------------------------------------------------ #
    # conversation
    # ------------------------------------------------------------------ #
    def send(self, text: str) -> None:
        if not text.strip():
            return

        self._append("user", text)

        status = self.summary
        if isinstance(status, SummaryPending):
            # the question is dropped, not queued
            self._append("bot", STILL_PROCESSING_TEXT)
            return
        if isinstance(status, SummaryFailed):
            self._append("bot", SUMMARY_FAILED_TEXT)
            return

        try:
            result = self.client.answer(text, self.website_content)
        except Exception:  # noqa: BLE001
            log.exception("Answer request raised")
            result = Err("Answer request raised")
        if isinstance(result, Err):
            self._append("bot", ERROR_TEXT)
        else:
            self._append("bot", result.value or NO_ANSWER_TEXT)

    def _append(self, sender: Sender, text: str) -> ConversationMessage:
        message = ConversationMessage(sender=sender, text=text)
        self._messages.append(message)
        return message
