"""Gemini client integration utilities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from google import genai


@dataclass
class Generation:
    """Outcome of one upstream call: generated text, or the error it raised."""

    text: Optional[str] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class GeminiClient:
    def __init__(
        self,
        api_key: str,
        model_name: str,
        client: Optional[genai.Client] = None,
    ) -> None:
        self.model_name = model_name
        self._client = client or genai.Client(api_key=api_key)

    async def send(self, history: Any, prompt: str) -> Generation:
        """
        Open a chat seeded with ``history`` and send ``prompt`` as the newest turn.
        History entries go to the SDK as-is, e.g.
          {"role": "user", "parts": [{"text": "..."}]}
        """
        try:
            chat = self._client.aio.chats.create(model=self.model_name, history=history)
            response = await chat.send_message(prompt)
            if response.text is None:
                # blocked or empty candidates
                raise ValueError(f"Gemini returned no text (model={self.model_name})")
            return Generation(text=response.text)
        except Exception as e:
            return Generation(error=e)
