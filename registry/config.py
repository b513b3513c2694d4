from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    host: str = Field(default="0.0.0.0", alias="REGISTRY_HOST")
    port: int = Field(default=8081, alias="REGISTRY_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    index_text: str = Field(default="Index page", alias="INDEX_TEXT")
    home_text: str = Field(default="This is home page", alias="HOME_TEXT")
    enable_metrics_endpoint: bool = Field(default=True, alias="ENABLE_METRICS_ENDPOINT")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
