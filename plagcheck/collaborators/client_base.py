from abc import ABC, abstractmethod


class BaseLLMClient(ABC):
    """Contract for provider-specific chat model clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """Return provider response as plain text."""
