"""
Application configuration and environment variables.
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _origins(value: str) -> list:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


class Settings:
    """Application settings loaded from environment variables."""
    
    # App settings
    APP_NAME: str = "Sync Notes"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    
    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    
    # Note storage
    DATA_DIR: str = os.getenv("DATA_DIR", "data")
    NOTE_RETENTION_SECONDS: int = int(os.getenv("NOTE_RETENTION_SECONDS", str(28 * 24 * 3600)))
    NOTE_SWEEP_INTERVAL_SECONDS: int = int(os.getenv("NOTE_SWEEP_INTERVAL_SECONDS", "300"))
    
    # Create-note requests
    TOKEN_TTL_SECONDS: int = int(os.getenv("TOKEN_TTL_SECONDS", "3600"))
    TOKEN_SWEEP_INTERVAL_SECONDS: int = int(os.getenv("TOKEN_SWEEP_INTERVAL_SECONDS", "300"))
    
    # CORS
    CORS_ORIGINS: list = _origins(os.getenv("CORS_ORIGINS", "*"))


settings = Settings()
