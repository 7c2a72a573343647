from typing import Literal

from pydantic import computed_field
from pydantic_core import MultiHostUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings, read from environment variables and the `.env` file
    next to the backend.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "Diecines"
    API_V1_STR: str = ""
    ENVIRONMENT: Literal["local", "testing", "production"] = "local"
    DEBUG: bool = False

    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DB: str = "diecines"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        return str(
            MultiHostUrl.build(
                scheme="postgresql+psycopg",
                username=self.POSTGRES_USER,
                password=self.POSTGRES_PASSWORD,
                host=self.POSTGRES_SERVER,
                port=self.POSTGRES_PORT,
                path=self.POSTGRES_DB,
            )
        )

    # In-memory SQLite keeps the test suite self-contained
    SQLALCHEMY_DATABASE_URI_TEST: str = "sqlite://"

    LOG_DIR: str = "app/logs"

    ENABLE_TELEGRAM: bool = False
    TELEGRAM_BOT_TOKEN: str | None = None
    TELEGRAM_USER_ID: str | None = None


settings = Settings()
