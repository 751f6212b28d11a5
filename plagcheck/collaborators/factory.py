from typing import ClassVar

from plagcheck.cache.base import BaseCache
from plagcheck.collaborators.authorship_classifier import LLMAuthorshipClassifier
from plagcheck.collaborators.base import (
    BaseAuthorshipClassifier,
    BaseSimilarityScorer,
    BaseSourceFinder,
)
from plagcheck.collaborators.cached import (
    CachedAuthorshipClassifier,
    CachedSimilarityScorer,
    CachedSourceFinder,
)
from plagcheck.collaborators.client_base import BaseLLMClient
from plagcheck.collaborators.example_adapters import DisabledSourceFinder, ExampleSourceFinder
from plagcheck.collaborators.example_client_adapter import ExampleClientAdapter
from plagcheck.collaborators.openai_client_adapter import OpenAIClientAdapter
from plagcheck.collaborators.serpapi_source_finder import SerpApiSourceFinder
from plagcheck.collaborators.similarity_scorer import LLMSimilarityScorer
from plagcheck.config.settings import Settings
from plagcheck.retry.executor import RetryExecutor


class CollaboratorFactory:
    """Creates the configured search, scoring and authorship adapters.

    Every adapter except the disabled source finder is wrapped with the cache
    and the retry executor.
    """

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
    }
    SEARCH_PROVIDERS: ClassVar[tuple[str, ...]] = ("serpapi", "example", "disabled")

    @classmethod
    def create_retry(cls, settings: Settings) -> RetryExecutor:
        return RetryExecutor(
            max_attempts=settings.retry_max_attempts,
            initial_delay=settings.retry_initial_delay_seconds,
            max_delay=settings.retry_max_delay_seconds,
        )

    @classmethod
    def create_source_finder(
        cls, settings: Settings, cache: BaseCache, retry: RetryExecutor
    ) -> BaseSourceFinder:
        provider = settings.search_provider.lower()
        if provider == "disabled":
            return DisabledSourceFinder()
        finder: BaseSourceFinder
        if provider == "example":
            finder = ExampleSourceFinder()
        elif provider == "serpapi":
            finder = SerpApiSourceFinder(
                api_key=settings.search_api_key,
                timeout_seconds=settings.search_timeout_seconds,
                num_results=settings.search_results_per_query,
            )
        else:
            raise ValueError(
                f"Unknown search provider '{provider}'. Choose from: {list(cls.SEARCH_PROVIDERS)}"
            )
        return CachedSourceFinder(finder, cache, retry, settings.cache_ttl_seconds)

    @classmethod
    def create_similarity_scorer(
        cls, settings: Settings, cache: BaseCache, retry: RetryExecutor
    ) -> BaseSimilarityScorer:
        scorer = LLMSimilarityScorer(
            client=cls.create_llm_client(settings),
            model=cls._resolve_model_name(settings),
            temperature=settings.llm_temperature,
        )
        return CachedSimilarityScorer(scorer, cache, retry, settings.cache_ttl_seconds)

    @classmethod
    def create_authorship_classifier(
        cls, settings: Settings, cache: BaseCache, retry: RetryExecutor
    ) -> BaseAuthorshipClassifier:
        classifier = LLMAuthorshipClassifier(
            client=cls.create_llm_client(settings),
            model=cls._resolve_model_name(settings),
            temperature=settings.llm_temperature,
            max_chars=settings.authorship_max_chars,
        )
        return CachedAuthorshipClassifier(classifier, cache, retry, settings.cache_ttl_seconds)

    @classmethod
    def create_llm_client(cls, settings: Settings) -> BaseLLMClient:
        provider = settings.llm_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        return OpenAIClientAdapter(
            api_key=settings.llm_api_key,
            timeout_seconds=settings.llm_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        custom = settings.llm_base_url.strip()
        if provider == "openai":
            return custom or None
        if provider == "openai_compatible":
            if not custom:
                raise ValueError(
                    "llm_base_url is required for llm_provider=openai_compatible"
                )
            return custom
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return custom or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown LLM provider '{provider}'. Choose from: {supported}")

    @classmethod
    def _resolve_model_name(cls, settings: Settings) -> str:
        if settings.llm_provider.lower() == "example":
            return "example"
        return settings.llm_model_name
