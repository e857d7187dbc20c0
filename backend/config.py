from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from backend.constants import DEFAULT_MODEL_NAME

class Settings(BaseSettings):
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = DEFAULT_MODEL_NAME
    SYSTEM_PROMPT_FILE: Optional[str] = None

    HOST: str = "0.0.0.0"
    PORT: int = 4000
    API_PREFIX: str = ""
    CORS_ORIGINS: List[str] = ["http://localhost:5173"]

    # Retries apply to transport errors and provider 429/5xx only
    PROVIDER_MAX_RETRIES: int = 2
    PROVIDER_BACKOFF_SECONDS: float = 1.0
    PROVIDER_TIMEOUT_MS: Optional[int] = None

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
