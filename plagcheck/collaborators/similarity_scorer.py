"""LLM-backed similarity scoring of a chunk against one web snippet."""

from pathlib import Path

from plagcheck.collaborators.base import BaseSimilarityScorer
from plagcheck.collaborators.client_base import BaseLLMClient
from plagcheck.collaborators.exceptions import ResponseParseError
from plagcheck.collaborators.json_response import parse_json_object
from plagcheck.collaborators.prompt_loader import load_prompt
from plagcheck.logging.logger import Log

_CHUNK_PROMPT_CHARS = 1000
_SNIPPET_PROMPT_CHARS = 500


class LLMSimilarityScorer(BaseSimilarityScorer):
    """Asks a chat model how strongly a chunk derives from a snippet."""

    def __init__(
        self,
        *,
        client: BaseLLMClient,
        model: str,
        temperature: float = 0.0,
        prompt_template_path: Path | None = None,
        system_prompt: str = "",
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt("similarity_prompt.txt", prompt_template_path)

    def score_similarity(self, chunk_text: str, candidate_snippet: str) -> float:
        prompt = self._prompt_template.format(
            chunk_text=chunk_text[:_CHUNK_PROMPT_CHARS],
            snippet=candidate_snippet[:_SNIPPET_PROMPT_CHARS],
        )
        try:
            raw_response = self._client.create_chat_completion(
                model=self._model,
                temperature=self._temperature,
                system_prompt=self._system_prompt,
                user_prompt=prompt,
            )
        except ResponseParseError as exc:
            Log.warning(f"Similarity response unusable, using 0: {exc}")
            return 0.0
        Log.debug(f"Similarity raw response:\n{raw_response}")
        return self._parse_score(raw_response)

    @staticmethod
    def _parse_score(raw: str) -> float:
        try:
            parsed = parse_json_object(raw)
        except ResponseParseError as exc:
            Log.warning(f"Failed to parse similarity score, using 0: {exc}")
            return 0.0
        value = parsed.get("similarity")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            Log.warning(f"Similarity response has no numeric 'similarity': {parsed}")
            return 0.0
        return max(0.0, min(1.0, float(value)))
