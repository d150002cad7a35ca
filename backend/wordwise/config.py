"""
Configuration settings for the Wordwise vocabulary app.
All environment variables and app settings are centralized here.
"""
from pydantic_settings import BaseSettings
from typing import Optional
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "Wordwise Vocabulary Coach"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # development, staging, production

    # API Settings
    API_V1_PREFIX: str = "/api/v1"
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",  # Vite default
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173"
    ]

    # OpenAI (leave unset to serve fixture content)
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o-mini"

    # Azure OpenAI (takes precedence over OpenAI when endpoint and key are set)
    AZURE_OPENAI_API_KEY: Optional[str] = None
    AZURE_OPENAI_ENDPOINT: Optional[str] = None
    AZURE_OPENAI_DEPLOYMENT_NAME: str = "gpt-4o-mini"
    AZURE_OPENAI_API_VERSION: str = "2024-02-15-preview"

    # Generation
    CONTENT_MAX_TOKENS: int = 600
    CONTENT_TEMPERATURE: float = 0.7

    # Practice games
    QUIZ_LENGTH: int = 5
    SWIPE_GAME_LENGTH: int = 10
    SWIPE_FEEDBACK_DELAY_SECONDS: float = 1.0

    # Input validation (characters, after stripping whitespace)
    DICTIONARY_MIN_QUERY_LENGTH: int = 2
    REVERSE_DICTIONARY_MIN_LENGTH: int = 10

    # Daily content cache (word of the day, quote of the day)
    DAILY_CACHE_FILE: str = ".cache/daily_content.json"
    DAILY_CACHE_TTL_HOURS: int = 24

    # Profile
    PROFILE_DISPLAY_NAME: str = "Jane Doe"

    # Logging
    LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True

    @property
    def use_azure_openai(self) -> bool:
        return bool(self.AZURE_OPENAI_ENDPOINT and self.AZURE_OPENAI_API_KEY)

    @property
    def remote_content_enabled(self) -> bool:
        """True when a generative content provider is configured."""
        return self.use_azure_openai or bool(self.OPENAI_API_KEY)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to ensure settings are loaded only once.
    """
    return Settings()


# Singleton instance
settings = get_settings()
