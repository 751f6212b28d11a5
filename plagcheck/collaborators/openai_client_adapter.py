import httpx
import openai

from plagcheck.collaborators.client_base import BaseLLMClient
from plagcheck.collaborators.exceptions import (
    ConfigurationError,
    ResponseParseError,
    UpstreamError,
    UpstreamNetworkError,
    UpstreamTimeoutError,
)


class OpenAIClientAdapter(BaseLLMClient):
    """Chat client built on the OpenAI-compatible chat completions API.

    SDK retries are disabled; retrying is the caller's job.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client: openai.OpenAI | None = None
        if api_key:
            self._client = openai.OpenAI(
                api_key=api_key,
                timeout=timeout_seconds,
                base_url=base_url,
                max_retries=0,
            )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        if self._client is None:
            raise ConfigurationError("Missing LLM API key (set LLM_API_KEY)")
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={"type": "json_object"},
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APITimeoutError, httpx.TimeoutException) as exc:
            raise UpstreamTimeoutError(f"AI provider timeout: {exc}") from exc
        except (openai.APIConnectionError, httpx.ConnectError) as exc:
            raise UpstreamNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIStatusError as exc:
            raise UpstreamError(
                f"AI provider API error ({exc.status_code}): {exc}",
                status_code=exc.status_code,
            ) from exc
        except openai.APIError as exc:
            raise UpstreamError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise ResponseParseError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise ResponseParseError("AI returned empty response")
        return content
