"""
Newsdesk Configuration Management
"""
from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional
from functools import lru_cache
from urllib.parse import quote_plus


_DEFAULT_DB_URI = "sqlite+aiosqlite:///./newsdesk.db"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_env: str = Field(default="development", alias="APP_ENV")
    app_name: str = Field(default="Newsdesk", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")

    # Server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8080, alias="PORT")

    # Database connection parts (MySQL)
    db_host: Optional[str] = Field(default=None, alias="DB_HOST")
    db_port: int = Field(default=3306, alias="DB_PORT")
    db_user: str = Field(default="", alias="DB_USER")
    db_password: str = Field(default="", alias="DB_PASSWORD")
    db_name: str = Field(default="", alias="DB_NAME")

    # Explicit URL wins over the parts above
    database_url_override: Optional[str] = Field(default=None, alias="DATABASE_URL")
    database_echo: bool = Field(default=False, alias="DATABASE_ECHO")
    store_timeout_seconds: float = Field(default=10.0, gt=0, alias="STORE_TIMEOUT_SECONDS")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="json", alias="LOG_FORMAT")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"

    @property
    def database_url(self) -> str:
        """
        Resolve the SQLAlchemy URL.

        DATABASE_URL is used verbatim when set; otherwise DB_HOST switches to
        MySQL built from the DB_* variables; otherwise a local SQLite file.
        """
        if self.database_url_override:
            return self.database_url_override
        if self.db_host:
            user = quote_plus(self.db_user)
            password = quote_plus(self.db_password)
            return (
                f"mysql+aiomysql://{user}:{password}"
                f"@{self.db_host}:{self.db_port}/{self.db_name}"
            )
        return _DEFAULT_DB_URI

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
