from typing import Optional
from urllib.parse import quote_plus
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # --- Basic configuration ---
    APP_NAME: str = "Product Catalog"
    APP_DESCRIPTION: str = "Product catalog service with arbitrary per-product attributes"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "development"  # development, production, testing
    DEBUG: bool = True

    # --- Document store (MongoDB) ---
    MONGO_HOST: str = "localhost"
    MONGO_PORT: int = 27017
    MONGO_USER: Optional[str] = None
    MONGO_PASSWORD: Optional[str] = None
    MONGO_DB_NAME: str = "catalog"
    MONGO_URL: Optional[str] = None  # Full connection string; overrides host/port/user when set
    MONGO_COLLECTION: str = "products"
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = 5000

    # Startup ping retries
    MONGO_CONNECT_RETRIES: int = 5
    MONGO_CONNECT_RETRY_DELAY: float = 5.0

    # Upper bound for a single store round trip (seconds)
    STORE_TIMEOUT_SECONDS: float = 10.0

    @property
    def MONGO_URI(self) -> str:
        if self.MONGO_URL:
            return self.MONGO_URL
        if self.MONGO_USER:
            safe_user = quote_plus(self.MONGO_USER)
            safe_password = quote_plus(self.MONGO_PASSWORD or "")
            return f"mongodb://{safe_user}:{safe_password}@{self.MONGO_HOST}:{self.MONGO_PORT}"
        return f"mongodb://{self.MONGO_HOST}:{self.MONGO_PORT}"

    # --- Logging ---
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"  # Console sink level; file sink always records DEBUG
    LOG_TO_FILE: bool = True

    # --- API route prefixes ---
    API_V1_PRODUCTS_PREFIX: str = "/api/v1/products"

    # --- Gunicorn process name (optional) ---
    GUNICORN_PROC_NAME: Optional[str] = None  # Fallback to APP_NAME when empty

    # --- Pydantic ---
    # Load env from project root .env; priority: env vars > .env > defaults
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
    )


# Singleton settings instance
settings = Settings()
