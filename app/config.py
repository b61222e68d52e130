# app/config.py
from functools import lru_cache
from urllib.parse import urlsplit

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def resolve_database_name(database_url: str, default: str) -> str:
    """Return the database named in a MongoDB URL path, or `default`."""
    path = urlsplit(database_url).path
    name = path.lstrip("/").split("?")[0]
    return name or default


class Settings(BaseSettings):
    # MongoDB settings
    DATABASE_URL: str
    DEFAULT_DB_NAME: str = "employee_management_db"

    # Seed settings
    SEED_JSON_DIR: str = "./db-migration/employee-management"

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    RELOAD: bool = True
    LOG_LEVEL: str = "INFO"

    # API settings
    API_PREFIX: str = "/api/employee-management"

    # Front-end runtime settings
    PRODUCTION: bool = False
    DEMO_USERNAME: str = Field(
        default="admin",
        validation_alias=AliasChoices("NG_APP_DEMO_USERNAME", "DEMO_USERNAME"),
    )
    DEMO_PASSWORD: str = Field(
        default="112233",
        validation_alias=AliasChoices("NG_APP_DEMO_PASSWORD", "DEMO_PASSWORD"),
    )
    API_BASE_URL: str = Field(
        default="/api/employee-management/",
        validation_alias=AliasChoices("NG_APP_API_BASE_URL", "API_BASE_URL"),
    )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def database_name(self) -> str:
        return resolve_database_name(self.DATABASE_URL, self.DEFAULT_DB_NAME)


@lru_cache()
def get_settings():
    return Settings()
