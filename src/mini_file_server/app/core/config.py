from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', case_sensitive=True, frozen=True, extra='ignore')
    HOST: str = '0.0.0.0'
    PORT: int = Field(default=8080, ge=1, le=65535)
    FILE_STORAGE_DIR: str = 'storage'
    SHUTDOWN_GRACE_SECONDS: int = Field(default=10, ge=0)
    LOG_LEVEL: str = 'INFO'


@lru_cache
def get_settings() -> Settings:
    return Settings()
