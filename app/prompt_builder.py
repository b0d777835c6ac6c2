
from dataclasses import dataclass
from enum import Enum
from typing import List, Type

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from pydantic import BaseModel

from .models import AnswerRequest, AnswerResponse, SummarizeRequest, SummarizeResponse


class TemplateId(str, Enum):
    SUMMARIZE = "summarize"
    ANSWER = "answer"


SUMMARIZE_SYSTEM_PROMPT: str = """\
You are an expert summarizer. You write short, plain-language summaries of
website content for visitors who have not read the site yet.
"""

SUMMARIZE_PROMPT_TEMPLATE: str = """\
Please provide a concise summary of the following website content:

Website Content:
{website_content}
"""

ANSWER_SYSTEM_PROMPT: str = """\
You are a chatbot answering questions about the content of a website.
Answer using only the website content you are given. If the content does not
contain the answer, say that you don't know.
"""

ANSWER_PROMPT_TEMPLATE: str = """\
Website Content: {website_content}

Question: {question}

Answer: """


@dataclass(frozen=True)
class PromptTemplate:
    system: str
    human: str
    input_model: Type[BaseModel]
    output_model: Type[BaseModel]
    output_field: str


PROMPTS: dict[TemplateId, PromptTemplate] = {
    TemplateId.SUMMARIZE: PromptTemplate(
        system=SUMMARIZE_SYSTEM_PROMPT,
        human=SUMMARIZE_PROMPT_TEMPLATE,
        input_model=SummarizeRequest,
        output_model=SummarizeResponse,
        output_field="website_summary",
    ),
    TemplateId.ANSWER: PromptTemplate(
        system=ANSWER_SYSTEM_PROMPT,
        human=ANSWER_PROMPT_TEMPLATE,
        input_model=AnswerRequest,
        output_model=AnswerResponse,
        output_field="answer",
    ),
}


class PromptBuilder:
    """
    Builds the system + human messages for one flow template.
    """

    def __init__(self, prompts: dict[TemplateId, PromptTemplate] | None = None):
        self._prompts = prompts or PROMPTS

    def template(self, template_id: TemplateId) -> PromptTemplate:
        return self._prompts[TemplateId(template_id)]

    def build(self, template_id: TemplateId, payload: BaseModel) -> List[BaseMessage]:
        template = self.template(template_id)
        # values are substituted verbatim; braces inside them are not re-parsed
        human = template.human.format(**payload.model_dump())
        return [SystemMessage(content=template.system), HumanMessage(content=human)]
