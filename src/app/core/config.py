import logging
import os
from pathlib import Path
from typing import Union

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

log_format = logging.Formatter("%(asctime)s : %(levelname)s - %(message)s")

# root logger
root_logger = logging.getLogger()
root_logger.setLevel(logging.INFO)

# standard stream handler
stream_handler = logging.StreamHandler()
stream_handler.setFormatter(log_format)
root_logger.addHandler(stream_handler)

logger = logging.getLogger(__name__)

env_path = Path(os.getenv("ENV_FILE", "./.env"))
if env_path.exists():
    load_dotenv(dotenv_path=env_path)
    logger.info(f"Loaded environment from {env_path}")
else:
    logger.info(f"No .env file at {env_path}, using process environment")

DEFAULT_SEED_FILE = Path(__file__).resolve().parent.parent / "db" / "seed" / "seed.yaml"


class Settings(BaseSettings):
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "rolegraph-api"

    # Database Configuration
    DATABASE_URL: str = Field(
        default="sqlite+aiosqlite:///./rolegraph.db",
        description="Async SQLAlchemy database URL (sqlite+aiosqlite or postgresql+asyncpg)"
    )
    SQL_ECHO: bool = False

    # Server Configuration
    SERVER_PORT: int = 8001
    BACKEND_CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, list[str]]) -> list[str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, list):
            return v
        elif isinstance(v, str):
            return [v]
        raise ValueError(v)

    # Seed data
    SEED_ON_STARTUP: bool = True
    SEED_FILE: Path = DEFAULT_SEED_FILE

    # JSON:API paging
    DEFAULT_PAGE_LIMIT: int = 20
    MAX_PAGE_LIMIT: int = 100

    model_config = SettingsConfigDict(case_sensitive=True, extra="ignore")


settings = Settings()

if not settings.DATABASE_URL:
    raise ValueError("DATABASE_URL environment variable is required")
