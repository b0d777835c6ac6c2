# app/executor.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage
from pydantic import BaseModel, ValidationError

from .exceptions import FlowValidationError, ProviderError
from .logger import logger
from .prompt_builder import PromptBuilder, TemplateId
from .response_parser import ResponseParser


class PromptExecutor(ABC):
    """Runs one templated prompt against the configured model provider."""

    @abstractmethod
    async def execute(
        self, template_id: TemplateId, payload: BaseModel | Mapping[str, Any]
    ) -> BaseModel:
        """Return the template's output model for ``payload``."""


class LLMPromptExecutor(PromptExecutor):
    """
    Prompt executor backed by a LangChain chat model.

    Responsibilities
    ----------------
    1. Validate the payload against the template input schema
    2. Build prompt messages                             -> PromptBuilder
    3. Call the LLM once                                 -> BaseChatModel
    4. Reduce the reply to text                          -> ResponseParser
    5. Validate the text against the template output schema
    """

    def __init__(
        self,
        llm: BaseChatModel,
        builder: PromptBuilder,
        parser: ResponseParser,
    ) -> None:
        self._llm = llm
        self._builder = builder
        self._parser = parser

    # --------------------------------------------------------------------- #
    # public API
    # --------------------------------------------------------------------- #
    async def execute(
        self, template_id: TemplateId, payload: BaseModel | Mapping[str, Any]
    ) -> BaseModel:
        """
        Run ONE prompt and return its validated output.

        Raises
        ------
        FlowValidationError
            If the payload or the model's output does not fit the schema.
        ProviderError
            If the model provider call fails.
        """
        template = self._builder.template(template_id)
        request = self._validate(template.input_model, payload, "input")

        messages = self._builder.build(template_id, request)
        try:
            llm_reply: AIMessage = await self._llm.ainvoke(messages)  # type: ignore
        except Exception as exc:  # noqa: BLE001
            logger.exception(
                "Model provider call failed",
                template=TemplateId(template_id).value,
                error=type(exc).__name__,
            )
            raise ProviderError(f"Model provider call failed: {exc}") from exc

        text = self._parser.parse_result([llm_reply])
        return self._validate(template.output_model, {template.output_field: text}, "output")

    # --------------------------------------------------------------------- #
    # helpers
    # --------------------------------------------------------------------- #
    @staticmethod
    def _validate(
        model: type[BaseModel], data: BaseModel | Mapping[str, Any], kind: str
    ) -> BaseModel:
        if isinstance(data, model):
            return data
        if isinstance(data, BaseModel):
            data = data.model_dump()
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise FlowValidationError(
                f"Invalid {kind} for {model.__name__}: {exc.errors(include_url=False)}"
            ) from exc
