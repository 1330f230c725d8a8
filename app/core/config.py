from typing import List, Literal

from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./customers.db"

    APP_TITLE: str = "Customer API"
    API_PREFIX: str = ""

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    CORS_ORIGINS_STR: str = "http://localhost:3000"

    CREATE_TABLES_ON_STARTUP: bool = True
    ENABLE_METRICS: bool = True

    @property
    def CORS_ORIGINS(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS_STR.split(',') if origin.strip()]


    class Config:
        env_file = ".env"

@lru_cache()
def get_settings():
    return Settings()
