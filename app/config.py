"""
Service configuration, read from environment variables or a .env file.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Sales Analytics Service"
    LOG_LEVEL: str = "INFO"

    # Populate the in-memory store with demo data when the service starts
    SEED_ON_STARTUP: bool = True

    TOP_PRODUCTS_LIMIT: int = 10

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
