"""
Podsift Configuration
Pydantic Settings for all configurable options.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- LLM Credentials ---
    groq_api_key: str = ""
    gemini_api_key: str = ""
    anthropic_api_key: str = ""

    # --- Provider Selection ---
    use_groq: bool = True  # Groq participates in the auto fallback chain
    default_provider: str = "auto"  # auto, groq, gemini, claude, ollama

    # --- Provider Models ---
    groq_model: str = "llama-3.3-70b-versatile"
    gemini_model: str = "gemini-2.0-flash-exp"
    claude_model: str = "claude-3-5-sonnet-20241022"
    ollama_model: str = "llama3.3:70b"
    ollama_url: str = "http://localhost:11434"

    # --- Provider Endpoints ---
    groq_base_url: str = "https://api.groq.com/openai/v1"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    anthropic_base_url: str = "https://api.anthropic.com/v1"
    anthropic_version: str = "2023-06-01"

    # --- Generation ---
    llm_temperature: float = 0.7
    llm_max_tokens: int = 4096
    llm_timeout_seconds: float = 120.0  # Per request, applied to every provider

    # --- Transcription (AssemblyAI) ---
    assemblyai_api_key: str = ""
    assemblyai_base_url: str = "https://api.assemblyai.com/v2"
    transcript_request_timeout_seconds: float = 30.0
    transcript_poll_interval_seconds: float = 1.0  # First wait between polls
    transcript_poll_backoff: float = 1.5  # Multiplier applied per poll
    transcript_poll_max_interval_seconds: float = 10.0
    transcript_timeout_seconds: float = 300.0  # Wall-clock ceiling for polling

    # --- Pipeline ---
    min_transcript_length: int = 50
    transcript_excerpt_length: int = 1000

    # --- Server ---
    api_host: str = "0.0.0.0"
    api_port: int = 3001
    log_level: str = "INFO"


# Global settings instance
settings = Settings()
