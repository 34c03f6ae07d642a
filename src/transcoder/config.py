from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from transcoder.core.text_encoding import TextEncoding


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TRANSCODER_", env_file=".env", extra="ignore")

    app_name: str = "transcoder"
    env: str = "dev"

    # Share links
    share_origin: str = Field(default="http://localhost:5173")
    default_text_encoding: TextEncoding = TextEncoding.UNICODE

    # Observability
    log_level: str = "INFO"
    log_json: bool = False


settings = Settings()
