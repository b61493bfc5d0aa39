from abc import ABC, abstractmethod
from typing import List


class LLMProvider(ABC):
    """
    Abstract Base Class interface that defines the contract for any reasoning
    backend (OpenAI, Azure OpenAI, a local model server, etc.)
    """

    @abstractmethod
    async def generate_text(
        self,
        messages: List[dict],
        temperature: float = 0.0
    ) -> str:
        """
        Sends the chat messages and returns the first choice's raw text.

        Raises:
            BackendError: the call failed or produced no usable text.
        """
        pass
