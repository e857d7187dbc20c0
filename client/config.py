from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

class ClientSettings(BaseSettings):
    REVIEW_BASE_URL: str = "http://localhost:4000"
    # No timeout by default: a hung gateway keeps the client in Submitting
    REVIEW_TIMEOUT: Optional[float] = None
    REVIEW_CODE_THEME: str = "monokai"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

@lru_cache
def get_client_settings():
    return ClientSettings()
