"""Application configuration module."""
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_env: str = Field(default="development", alias="APP_ENV")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, alias="PORT")

    pg_host: str = Field(..., alias="PGHOST")
    pg_port: int = Field(default=5432, alias="PGPORT")
    pg_user: str = Field(..., alias="PGUSER")
    pg_password: str = Field(default="", alias="PGPASSWORD")
    pg_database: str = Field(..., alias="PGDATABASE")
    pg_pool_max_size: int = Field(default=10, alias="PG_POOL_MAX_SIZE")
    create_schema: bool = Field(default=True, alias="CREATE_SCHEMA")

    recommendation_count: int = Field(default=10, ge=1, alias="RECOMMENDATION_COUNT")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cors_origins: List[str] = Field(
        default=[
            "http://127.0.0.1:3000",
            "http://localhost:3000",
            "http://127.0.0.1:8000",
            "http://localhost:8000",
        ],
        alias="CORS_ORIGINS",
    )

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "populate_by_name": True,
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
