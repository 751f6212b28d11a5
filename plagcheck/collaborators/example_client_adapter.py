"""Example LLM client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseLLMClient and register the provider in CollaboratorFactory.
"""

import json
from typing import ClassVar

from plagcheck.collaborators.client_base import BaseLLMClient


class ExampleClientAdapter(BaseLLMClient):
    """Example adapter that returns a fixed JSON judgment.

    No network calls. The payload carries the keys both the similarity scorer
    and the authorship classifier read, so either can run on top of it.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "similarity": 0.0,
        "likelihood": 0.2,
        "verdict": "likely_human",
    }

    def __init__(self, response: dict[str, object] | None = None) -> None:
        self._response = response if response is not None else self.DEFAULT_RESPONSE

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt
        return json.dumps(self._response)
