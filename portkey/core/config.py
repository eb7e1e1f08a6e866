# portkey/core/config.py

from typing import Any, List
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# project root (two levels above this package)
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    Pydantic BaseSettings model holding every application setting.
    Values are read from environment variables and the project-root .env file.
    """

    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=True
    )

    # --- Application ---
    APP_NAME: str = "PortKey API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Logistics and customs-brokerage tracking API"
    APP_ENV: str = Field("development", description="Application environment (development, production, testing)")
    DEBUG_MODE: bool = Field(False, description="Echo SQL and enable verbose error messages")
    LOG_LEVEL: str = Field("INFO", description="Root logging level")

    # --- Database ---
    DATABASE_URL: SecretStr = Field(..., description="Async SQLAlchemy database URL (postgresql+asyncpg://...)")
    AUTO_CREATE_TABLES: bool = Field(False, description="Run metadata.create_all on startup (development only)")

    # --- JWT issued by the identity provider ---
    JWT_SECRET: SecretStr = Field(..., description="Secret used to verify identity-provider access tokens")
    JWT_ALGORITHM: str = Field("HS256", description="JWT signing algorithm")
    JWT_AUDIENCE: str = Field("authenticated", description="Expected 'aud' claim")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(60, description="Lifetime of locally minted access tokens")

    # --- CORS ---
    CORS_ALLOWED_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080"],
        description="Origins allowed to call the API from a browser"
    )

    # --- Dashboard / seeding ---
    DELAYED_SHIPMENT_DAYS: int = Field(30, description="Age in days after which an undelivered shipment counts as delayed")
    SEED_SHIPMENT_COUNT: int = Field(40, description="Number of demo shipments created by the seeder")

    def model_post_init(self, __context: Any) -> None:  # noqa: ANN001
        self.LOG_LEVEL = self.LOG_LEVEL.upper()


settings = Settings()
