from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """
    
    # Application
    app_name: str = "Chirpy"
    app_version: str = "1.0.0"
    log_level: str = "INFO"
    
    # Deployment mode. Only "dev" allows POST /admin/reset
    platform: str = "prod"
    
    # Server
    host: str = "127.0.0.1"
    port: int = 8080
    
    # Database
    db_url: str = "sqlite:///./chirpy.db"
    storage_backend: Literal["sqlalchemy", "memory"] = "sqlalchemy"
    
    # Static files served under /app
    filepath_root: str = str(Path(__file__).resolve().parent / "static")
    
    # Chirps
    max_chirp_length: int = 140
    
    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def is_dev(self) -> bool:
        return self.platform == "dev"


# Create settings instance
settings = Settings()
