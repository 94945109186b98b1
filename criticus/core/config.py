"""Application configuration with environment variables."""

from sqlalchemy.engine import make_url
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Environment
    ENV: str = "dev"

    # App Version (format: a.bc.de - major.feature.patch)
    VERSION: str = "0.01.00"

    # Database
    # sqlite:///... runs the embedded store, postgresql+psycopg://... the hosted one
    DATABASE_URL: str = "sqlite:///./criticus.db"
    AUTO_CREATE_TABLES: bool = True

    # CORS (comma-separated)
    CORS_ORIGINS: str = "*"

    # Admin read surface (X-Admin-Secret header). Empty disables it.
    ADMIN_SECRET: str = ""

    # Error Tracking (optional, set in production)
    SENTRY_DSN: str = ""

    # Rate Limiting (submissions per minute per client, 0 disables)
    RATE_LIMIT_FORMS: int = 10

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def is_dev(self) -> bool:
        return self.ENV == "dev"

    @property
    def is_sqlite(self) -> bool:
        return make_url(self.DATABASE_URL).get_backend_name() == "sqlite"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list."""
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()


def get_settings() -> Settings:
    return settings
