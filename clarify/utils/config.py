"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseModel):
    """Database connection settings."""

    url: str = Field(
        default="sqlite+aiosqlite:///./clarify.db",
        description="SQLAlchemy async database URL",
    )
    echo: bool = Field(default=False, description="Log SQL statements")


class APISettings(BaseModel):
    """HTTP server settings."""

    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)
    reload: bool = False


class SecuritySettings(BaseModel):
    """API key and CORS settings."""

    api_key: str = Field(default="", description="Require this key on every request when set")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173"],
        description="Allowed CORS origins",
    )
    rate_limit_per_minute: int = Field(default=120, ge=1)

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_origins(cls, v):
        """Accept a comma-separated string as well as a list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


class AISettings(BaseModel):
    """Text-generation backend used for criteria/evaluation suggestions."""

    api_key: str = Field(default="", description="Backend API key")
    base_url: str = Field(
        default="https://api.groq.com/openai/v1",
        description="OpenAI-compatible API base URL",
    )
    model: str = "llama-3.1-8b-instant"
    temperature: float = Field(default=0.6, ge=0.0, le=2.0)
    max_retries: int = Field(default=3, ge=0)


class LoggingSettings(BaseModel):
    level: str = "INFO"
    json_output: bool = True


class Settings(BaseSettings):
    """Application settings.

    Nested sections are read from environment variables using a double
    underscore delimiter, e.g. ``DATABASE__URL``, ``AI__API_KEY`` or
    ``SECURITY__API_KEY``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    environment: str = Field(default="development", pattern="^(development|test|production)$")
    debug: bool = False

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    api: APISettings = Field(default_factory=APISettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)
    ai: AISettings = Field(default_factory=AISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
