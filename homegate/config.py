from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.types import TruncationWindow


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    # --- Backend ---
    HOMEGATE_BACKEND_URL: str = "https://api.homegate.ch"

    # --- Static client credentials (Basic auth) ---
    HOMEGATE_API_USERNAME: str = "hg_android"
    HOMEGATE_API_PASSWORD: str = ""

    # --- Emulated app identity ---
    HOMEGATE_USER_AGENT: str = "homegate.ch App Android"
    HOMEGATE_APP_VERSION: str = "Homegate/12.6.0/12060003/Android/30"
    HOMEGATE_APP_ID_SALT: str = ""
    HOMEGATE_APP_ID_WINDOW: TruncationWindow = TruncationWindow.hour

    # Handed to httpx as-is; nothing here retries.
    HTTP_TIMEOUT_S: float = 30.0

    @field_validator("HOMEGATE_BACKEND_URL")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


settings = Settings()
