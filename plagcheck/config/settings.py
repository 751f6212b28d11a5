from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    min_text_length: int = 50
    max_text_length: int = 200_000

    chunk_size: int = 1400
    chunk_overlap: int = 200
    max_chunks_to_process: int = 20

    max_concurrent_chunks: int = 3
    batch_pacing_seconds: float = 0.25
    pipeline_deadline_seconds: float = 45.0

    top_sources_per_chunk: int = 3
    match_threshold: float = 0.3
    suspicious_threshold: float = 0.5
    plagiarism_weight: float = 0.6
    ai_weight: float = 0.4
    high_risk_threshold: float = 60.0
    medium_risk_threshold: float = 30.0

    retry_max_attempts: int = 3
    retry_initial_delay_seconds: float = 0.5
    retry_max_delay_seconds: float = 5.0

    cache_redis_url: str = ""
    cache_connect_timeout_seconds: float = 1.0
    cache_local_max_entries: int = 500
    cache_ttl_seconds: int = 60 * 60 * 24

    search_provider: str = "serpapi"
    search_api_key: str = ""
    search_timeout_seconds: int = 10
    search_results_per_query: int = 10

    llm_provider: str = "gemini"
    llm_api_key: str = ""
    llm_model_name: str = "gemini-2.5-flash"
    llm_timeout_seconds: int = 30
    llm_temperature: float = 0.0
    llm_base_url: str = ""
    authorship_max_chars: int = 200_000

    pdf_engine: str = "pdfplumber"
    max_file_size_bytes: int = 10 * 1024 * 1024
