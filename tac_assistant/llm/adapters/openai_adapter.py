import logging
from typing import List

from openai import AsyncOpenAI, OpenAIError

from ..interface import LLMProvider
from ...config import settings
from ...services.exceptions import BackendError

logger = logging.getLogger(__name__)


class OpenAIAdapter(LLMProvider):
    def __init__(self, api_key: str, model_name: str = settings.OPENAI_MODEL):
        self.client = AsyncOpenAI(api_key=api_key)
        self.model_name = model_name

    async def generate_text(
        self,
        messages: List[dict],
        temperature: float = 0.0
    ) -> str:
        try:
            completion = await self.client.chat.completions.create(
                model=self.model_name,
                messages=messages,
                temperature=temperature,
            )
        except OpenAIError as e:
            logger.error(f"OpenAI request failed: {e}")
            raise BackendError(f"Reasoning backend call failed: {e}") from e

        # Only the first choice's text is read.
        if not completion.choices:
            raise BackendError("Reasoning backend returned no choices.")
        content = completion.choices[0].message.content
        if content is None:
            raise BackendError("Reasoning backend returned an empty message.")

        logger.debug(f"Backend response ({len(content)} chars) from {self.model_name}")
        return content
