
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_settings
from .di import knowledge_base, lifespan, prompt_executor
from .exceptions import FlowError
from .executor import PromptExecutor
from .flows import answer_questions_about_website, generate_website_summary
from .knowledge import KnowledgeBase
from .logger import logger
from .models import AnswerRequest, AnswerResponse, SummarizeRequest, SummarizeResponse

app = FastAPI(title="Website Chat API", lifespan=lifespan)

# the widget is embedded on other origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_allow_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FlowError)
async def flow_error_handler(request: Request, exc: FlowError) -> JSONResponse:
    logger.warning(
        "Flow request failed",
        path=request.url.path,
        error=type(exc).__name__,
        status_code=exc.status_code,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.post("/flows/summarize", response_model=SummarizeResponse)
async def summarize_endpoint(
    req: SummarizeRequest,
    executor: PromptExecutor = Depends(prompt_executor),
):
    return await generate_website_summary(req, executor)


@app.post("/flows/answer", response_model=AnswerResponse)
async def answer_endpoint(
    req: AnswerRequest,
    executor: PromptExecutor = Depends(prompt_executor),
    kb: KnowledgeBase = Depends(knowledge_base),
):
    return await answer_questions_about_website(req, executor, kb)


@app.get("/health")
def check_health():
    return {"status": "ok"}


"""
uvicorn app.main:app --reload

curl -X POST http://localhost:8000/flows/answer \
  -H "Content-Type: application/json" \
  -d '{"question": "What services do you offer?", "websiteContent": "Welcome to Acme Corp!"}'
"""
