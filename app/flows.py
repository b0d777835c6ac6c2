"""
The two prompt flows served to the chat widget.

* ``generate_website_summary`` - concise summary of the site content.
* ``answer_questions_about_website`` - answers a visitor question using the
  knowledge base plus the site content.
"""

from .executor import PromptExecutor
from .knowledge import KnowledgeBase
from .logger import logger
from .models import AnswerRequest, AnswerResponse, SummarizeRequest, SummarizeResponse
from .prompt_builder import TemplateId


async def generate_website_summary(
    request: SummarizeRequest, executor: PromptExecutor
) -> SummarizeResponse:
    logger.info("Summarizing website", content_chars=len(request.website_content))
    result = await executor.execute(TemplateId.SUMMARIZE, request)
    logger.info("Website summary ready", summary_chars=len(result.website_summary))
    return result


async def answer_questions_about_website(
    request: AnswerRequest,
    executor: PromptExecutor,
    knowledge_base: KnowledgeBase,
) -> AnswerResponse:
    knowledge = knowledge_base.read()
    combined = request.model_copy(
        update={"website_content": f"{knowledge} {request.website_content}"}
    )
    logger.info(
        "Answering question",
        question_chars=len(request.question),
        content_chars=len(combined.website_content),
    )
    return await executor.execute(TemplateId.ANSWER, combined)
