"""LLM-backed AI-authorship classification of a whole document."""

from pathlib import Path

from plagcheck.collaborators.base import BaseAuthorshipClassifier
from plagcheck.collaborators.client_base import BaseLLMClient
from plagcheck.collaborators.exceptions import ResponseParseError
from plagcheck.collaborators.json_response import parse_json_object
from plagcheck.collaborators.models import AIDetectionResult, AIVerdict, clamp_likelihood
from plagcheck.collaborators.prompt_loader import load_prompt
from plagcheck.logging.logger import Log

_VALID_VERDICTS = frozenset(v.value for v in AIVerdict)


class LLMAuthorshipClassifier(BaseAuthorshipClassifier):
    """Asks a chat model whether a text was machine-generated."""

    def __init__(
        self,
        *,
        client: BaseLLMClient,
        model: str,
        temperature: float = 0.0,
        max_chars: int = 200_000,
        prompt_template_path: Path | None = None,
        system_prompt: str = "",
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._max_chars = max_chars
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt("authorship_prompt.txt", prompt_template_path)

    def classify_authorship(self, full_text: str) -> AIDetectionResult:
        text = full_text[: self._max_chars].strip()
        raw_response = self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=self._prompt_template.format(text=text),
        )
        Log.debug(f"Authorship raw response:\n{raw_response}")
        result = self._parse_result(raw_response)
        Log.info(
            f"Authorship classified: likelihood={result.likelihood:.2f} "
            f"verdict={result.verdict.value}"
        )
        return result

    @staticmethod
    def _parse_result(raw: str) -> AIDetectionResult:
        parsed = parse_json_object(raw)
        likelihood = parsed.get("likelihood")
        if isinstance(likelihood, bool) or not isinstance(likelihood, (int, float)):
            raise ResponseParseError("Authorship response has no numeric 'likelihood'")
        verdict = parsed.get("verdict")
        if verdict not in _VALID_VERDICTS:
            return AIDetectionResult.from_likelihood(float(likelihood))
        # kept as returned; the pipeline reconciles it with the likelihood
        return AIDetectionResult(
            likelihood=clamp_likelihood(float(likelihood)),
            verdict=AIVerdict(verdict),
        )
