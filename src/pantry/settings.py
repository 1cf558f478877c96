from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    title: str = "Pantry API"

    # ---- uvicorn ----
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # load sample recipes into a fresh store
    seed: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PANTRY_",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
