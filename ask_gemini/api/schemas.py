from typing import Any

from pydantic import BaseModel, Field, StrictStr, field_validator

INVALID_PROMPT_MESSAGE = "The function must be called with a non-empty 'prompt' string."


class AskPayload(BaseModel):
    prompt: StrictStr = Field(..., description="Newest user turn")
    history: Any = Field(default_factory=list, description="Prior turns, passed to Gemini unchanged")

    @field_validator("prompt")
    @classmethod
    def prompt_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError(INVALID_PROMPT_MESSAGE)
        return v

    @field_validator("history", mode="before")
    @classmethod
    def default_history(cls, v: Any) -> Any:
        # falsy history (null, [], "", 0) means no prior turns
        return v or []


class AskRequest(BaseModel):
    """Callable-function style envelope: the payload sits under ``data``."""

    data: AskPayload


class ResultBody(BaseModel):
    text: str


class ResultEnvelope(BaseModel):
    result: ResultBody


class ErrorBody(BaseModel):
    message: str


class ErrorEnvelope(BaseModel):
    error: ErrorBody

    @classmethod
    def of(cls, message: str) -> "ErrorEnvelope":
        return cls(error=ErrorBody(message=message))
