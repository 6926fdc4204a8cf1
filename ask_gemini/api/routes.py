from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ask_gemini.api.schemas import AskRequest, ErrorEnvelope, ResultBody, ResultEnvelope
from ask_gemini.config import logger
from ask_gemini.services.chat import ChatFailure, ChatService

router = APIRouter()


def get_chat_service(request: Request) -> ChatService:
    return request.app.state.chat_service


# Served on every path, like a managed function URL: "/" and "/askGemini" behave the same.
@router.post(
    "/{path:path}",
    response_model=ResultEnvelope,
    responses={400: {"model": ErrorEnvelope}, 500: {"model": ErrorEnvelope}},
)
async def ask(path: str, req: AskRequest, svc: ChatService = Depends(get_chat_service)):
    payload = req.data
    logger.info(f"/{path} called: prompt_len={len(payload.prompt)}")
    outcome = await svc.chat(prompt=payload.prompt, history=payload.history)
    if isinstance(outcome, ChatFailure):
        return JSONResponse(
            status_code=outcome.status_code,
            content=ErrorEnvelope.of(outcome.message).model_dump(),
        )
    return ResultEnvelope(result=ResultBody(text=outcome.text))
