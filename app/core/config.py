from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import List

class Settings(BaseSettings):
    OHANA_API_ENDPOINT: str = "https://ohana-api-demo.herokuapp.com/api"
    OHANA_API_TOKEN: str | None = None
    OHANA_TIMEOUT: float = 30.0
    OHANA_USER_AGENT: str = "Ohana Web Search"

    SENTRY_DSN: str | None = None
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Ohana Web Search"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )

@lru_cache()
def get_settings() -> Settings:
    return Settings()
