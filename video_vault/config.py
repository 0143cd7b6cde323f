"""
Application settings for Video Vault.

Values are read from the environment (prefix ``VIDEO_VAULT_``) or an
optional ``.env`` file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="VIDEO_VAULT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    PROJECT_NAME: str = "Video Vault"
    VERSION: str = "1.0.0"
    DATABASE_URL: str = "sqlite:///./video_vault.db"
    SQL_ECHO: bool = False
    LOG_LEVEL: str = "INFO"
    USER_ID_HEADER: str = "X-User-Id"
    CORS_ORIGINS: list[str] = ["*"]


settings = Settings()
