from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    ENV: str = Field(default="dev")  # dev|prod

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_JSON: bool | None = Field(default=None)  # defaults to JSON in prod

    # Security
    JWT_SECRET: str = Field(default="change-me")
    JWT_ALG: str = Field(default="HS256")
    JWT_EXPIRES_MIN: int = Field(default=60 * 24)
    SESSION_COOKIE_NAME: str = Field(default="session-token")

    # Datastore
    DATABASE_PATH: str = Field(default="data/database.json")

    # CORS
    CORS_ORIGINS: str = Field(default="http://localhost:3000,http://localhost")

    # i18n
    DEFAULT_LOCALE: str = Field(default="en")

    # Seed
    SEED_DEMO: bool = Field(default=True)
    DEFAULT_ADMIN_EMAIL: str = Field(default="admin@example.com")
    DEFAULT_ADMIN_PASSWORD: str = Field(default="admin123")


settings = Settings()
