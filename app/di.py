from contextlib import asynccontextmanager

from fastapi import Depends
from langchain_openai import ChatOpenAI

from .config import Settings, get_settings
from .executor import LLMPromptExecutor, PromptExecutor
from .knowledge import KnowledgeBase
from .logger import logger
from .prompt_builder import PromptBuilder
from .response_parser import ResponseParser


def settings() -> Settings:
    return get_settings()

def prompt_builder() -> PromptBuilder:
    return PromptBuilder()

def response_parser() -> ResponseParser:
    return ResponseParser()

def chat_model(cfg: Settings = Depends(settings)) -> ChatOpenAI:
    # OPENAI_API_KEY is picked up from the environment by langchain-openai
    return ChatOpenAI(model=cfg.llm_model, temperature=cfg.llm_temperature)

def prompt_executor(
    llm: ChatOpenAI = Depends(chat_model),
    builder: PromptBuilder = Depends(prompt_builder),
    parser: ResponseParser = Depends(response_parser),
) -> PromptExecutor:
    return LLMPromptExecutor(llm, builder, parser)

def knowledge_base(cfg: Settings = Depends(settings)) -> KnowledgeBase:
    return KnowledgeBase(cfg.knowledge_base_path)

@asynccontextmanager
async def lifespan(app):
    cfg = get_settings()
    if not cfg.knowledge_base_path.is_file():
        logger.warning("Knowledge base file is missing", path=str(cfg.knowledge_base_path))
    logger.info("Chat service starting", model=cfg.llm_model)
    try:
        yield
    finally:
        logger.info("Chat service stopped")
