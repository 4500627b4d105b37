from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

class Settings(BaseSettings):
    # App
    APP_NAME: str = "BFHL API"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Envelope
    OFFICIAL_EMAIL: str = ""

    # AI provider
    OPENAI_API_KEY: str = ""
    OPENAI_API_BASE: str = "https://api.openai.com/v1"
    OPENAI_MODEL: str = "gpt-4o-mini"
    AI_MAX_TOKENS: int = 10
    AI_TIMEOUT_SECONDS: float = 30.0

    # Limits
    MAX_FIBONACCI_TERMS: int = 10000
    MAX_PRIME_VALUE: int = 10**12

    # HTTP
    CORS_ALLOW_ORIGINS: str = "*"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=True, extra="ignore", frozen=True
    )

    @property
    def cors_origins(self) -> list[str]:
        """Parse the comma separated CORS origin list."""
        return [origin.strip() for origin in self.CORS_ALLOW_ORIGINS.split(",") if origin.strip()]

@lru_cache()
def get_settings() -> Settings:
    return Settings()
