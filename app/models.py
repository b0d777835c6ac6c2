
from pydantic import BaseModel, ConfigDict, Field


class FlowModel(BaseModel):
    # accept both the camelCase wire names and the python field names
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class SummarizeRequest(FlowModel):
    website_content: str = Field(
        ..., alias="websiteContent", description="The complete content of the website."
    )


class SummarizeResponse(FlowModel):
    website_summary: str = Field(
        ..., alias="websiteSummary", description="A concise summary of the website content."
    )


class AnswerRequest(FlowModel):
    question: str = Field(..., description="The question to answer about the website.")
    website_content: str = Field(
        ...,
        alias="websiteContent",
        description="The content of the website to use for answering the question.",
    )


class AnswerResponse(FlowModel):
    answer: str = Field(..., description="The answer to the question about the website.")
