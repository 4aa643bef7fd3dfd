from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "so-answer-judge"
    database_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL", "database_url"),
        description=(
            "SQLAlchemy async DB URL (e.g. mssql+aioodbc://... or sqlite+aiosqlite:///...). "
            "Takes precedence over the DB_* parts below."
        ),
    )

    # SQL Server connection parts (used when DATABASE_URL is not set)
    db_user: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DB_USER", "db_user"),
    )
    db_password: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DB_PASSWORD", "db_password"),
    )
    db_server: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DB_SERVER", "db_server"),
        description="SQL Server host name (optionally host,port).",
    )
    db_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DB_NAME", "DATABASE", "db_name"),
    )
    db_odbc_driver: str = Field(
        default="ODBC Driver 18 for SQL Server",
        validation_alias=AliasChoices("DB_ODBC_DRIVER", "db_odbc_driver"),
    )

    # LLM integration (OpenAI chat completions)
    openai_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "openai_api_key"),
        description="OpenAI API key (required for POST / and POST /compare).",
    )
    openai_model: str = Field(
        default="gpt-3.5-turbo",
        validation_alias=AliasChoices("OPENAI_MODEL", "openai_model"),
        description="Model used by POST /. POST /compare takes the model from the request.",
    )
    openai_base_url: str = Field(
        default="https://api.openai.com/v1",
        validation_alias=AliasChoices("OPENAI_BASE_URL", "openai_base_url"),
        description="Base URL for OpenAI API (override for proxies/emulators).",
    )
    openai_timeout_seconds: float = Field(
        default=120.0,
        ge=1.0,
        validation_alias=AliasChoices("OPENAI_TIMEOUT_SECONDS", "openai_timeout_seconds"),
        description="Timeout for OpenAI API requests (seconds).",
    )

    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        validation_alias=AliasChoices("CORS_ALLOW_ORIGINS", "cors_allow_origins"),
    )

    host: str = Field(default="0.0.0.0", validation_alias=AliasChoices("HOST", "host"))
    port: int = Field(default=3000, ge=1, le=65535, validation_alias=AliasChoices("PORT", "port"))

    @property
    def sqlalchemy_database_url(self) -> str | None:
        """Resolved DB URL, or None when the database is not configured at all."""
        if self.database_url:
            return self.database_url
        if not (self.db_server and self.db_name):
            return None

        url = URL.create(
            "mssql+aioodbc",
            username=self.db_user,
            password=self.db_password,
            host=self.db_server,
            database=self.db_name,
            query={
                "driver": self.db_odbc_driver,
                "Encrypt": "yes",
                "TrustServerCertificate": "yes",
            },
        )
        return url.render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()
