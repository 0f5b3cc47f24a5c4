from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env from the project root so it loads regardless of cwd
_BACKEND_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _BACKEND_ROOT / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(str(_ENV_FILE), ".env", "../.env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str
    # Hosted Postgres requires SSL; disable for a local server
    database_ssl: bool = True
    # Run create_all on startup instead of Alembic (local development only)
    auto_create_tables: bool = False

    # CORS
    cors_origins: str = "http://localhost:5173"

    # Opening hours shown for weekdays that have no stored availability row yet
    default_opening_time: str = "09:00"
    default_closing_time: str = "17:00"
    default_open_weekdays: str = "1,2,3,4,5"  # 0 = Sunday

    # Env
    env: str = "development"

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def default_open_weekdays_set(self) -> set[int]:
        return {int(d) for d in self.default_open_weekdays.split(",") if d.strip()}


settings = Settings()
