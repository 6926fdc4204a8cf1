from dataclasses import dataclass
from typing import Any, Optional, Union

from ask_gemini.config import logger
from ask_gemini.integration.gemini import GeminiClient

MISSING_CONFIG_MESSAGE = "The server is missing its API configuration."
UPSTREAM_FAILURE_MESSAGE = "An error occurred while communicating with the AI."


@dataclass
class ChatReply:
    text: str


@dataclass
class ChatFailure:
    status_code: int
    message: str


ChatOutcome = Union[ChatReply, ChatFailure]


class ChatService:
    """Forwards a prompt plus prior turns to Gemini and reduces the result to a ChatOutcome.

    ``client`` is None when the server was started without an API key; every
    call then fails as a misconfiguration without touching the network.
    """

    def __init__(self, client: Optional[GeminiClient]):
        logger.debug(f"ChatService.__init__ configured={client is not None}")
        self.client = client

    async def chat(self, prompt: str, history: Any) -> ChatOutcome:
        if self.client is None:
            logger.error("GEMINI_API_KEY secret not set in the environment.")
            return ChatFailure(status_code=500, message=MISSING_CONFIG_MESSAGE)

        logger.info(f"ChatService.chat model={self.client.model_name} history_type={type(history).__name__}")
        generation = await self.client.send(history, prompt)
        if not generation.ok:
            logger.opt(exception=generation.error).error("Error calling Google Generative AI")
            return ChatFailure(status_code=500, message=UPSTREAM_FAILURE_MESSAGE)

        logger.info(f"Received response from Gemini: {generation.text}")
        return ChatReply(text=generation.text)
