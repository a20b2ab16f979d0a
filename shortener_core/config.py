from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from urllib.parse import quote_plus


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment
    environment: str = "development"
    debug: bool = False

    # Application
    app_name: str = "URL Shortener Core"
    app_version: str = "1.0.0"

    # Server
    host: str = "0.0.0.0"
    core_port: int = 3000

    # Database
    # DATABASE_URL wins; otherwise a MySQL URL is built from the DB_* parts
    database_url: Optional[str] = None
    db_host: str = "localhost"
    db_port: int = 3306
    db_user: str = "root"
    db_password: str = ""
    db_name: str = "url_shortener"
    db_echo: bool = False
    init_db_on_startup: bool = True

    # Logging
    log_level: str = "INFO"

    # Internal sync auth
    api_token_header: str = "x-api-token"
    token_bytes: int = 32  # 256 bits of entropy per issued token

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def database_url_computed(self) -> str:
        """Database URL, built from the DB_* settings if DATABASE_URL is unset."""
        if self.database_url:
            return self.database_url
        return (
            f"mysql+pymysql://{quote_plus(self.db_user)}:{quote_plus(self.db_password)}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )


# Create settings instance
settings = Settings()
