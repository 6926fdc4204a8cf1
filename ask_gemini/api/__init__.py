from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from ask_gemini.api.routes import router
from ask_gemini.api.schemas import INVALID_PROMPT_MESSAGE, ErrorEnvelope
from ask_gemini.config import Settings, __version__, get_settings, logger
from ask_gemini.integration.gemini import GeminiClient
from ask_gemini.services.chat import ChatService


def create_app(settings: Optional[Settings] = None, client: Optional[GeminiClient] = None) -> FastAPI:
    """Build the service. ``client`` overrides the Gemini client built from ``settings``."""
    settings = settings or get_settings()
    if client is None and settings.gemini_api_key:
        client = GeminiClient(api_key=settings.gemini_api_key, model_name=settings.model_name)
    if client is None:
        logger.warning("GEMINI_API_KEY is not configured; requests will fail with 500")

    app = FastAPI(title="ask-gemini", version=__version__)
    app.state.settings = settings
    app.state.chat_service = ChatService(client)

    @app.middleware("http")
    async def cors_and_method_gate(request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=204)
        elif request.method != "POST":
            logger.debug(f"Rejected {request.method} {request.url.path}")
            response = PlainTextResponse("Method Not Allowed", status_code=405)
        else:
            response = await call_next(request)
        response.headers.update(settings.cors_headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError):
        logger.info(f"Invalid request body: {exc.errors()}")
        return JSONResponse(status_code=400, content=ErrorEnvelope.of(INVALID_PROMPT_MESSAGE).model_dump())

    app.include_router(router)
    return app


app = create_app()
