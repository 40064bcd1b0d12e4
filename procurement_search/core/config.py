
from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Procurement Search API"
    app_env: str = "development"
    app_port: int = 8000
    frontend_url: str = "http://localhost:3001"

    # Database (SQLite file for local dev, any async SQLAlchemy URL otherwise)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./db.sqlite3",
        alias="DATABASE_URL",
    )
    create_tables: bool = Field(
        default=True, alias="CREATE_TABLES",
    )  # create_all on startup; there are no migrations

    # Record search paging
    max_page_size: int = Field(default=100, alias="MAX_PAGE_SIZE")
    default_page_size: int = Field(default=10, alias="DEFAULT_PAGE_SIZE")

    # Client-side presentation
    display_locale: str = Field(default="en_US", alias="DISPLAY_LOCALE")
    api_base_url: str = Field(default="http://localhost:8000", alias="API_BASE_URL")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

settings = Settings()
