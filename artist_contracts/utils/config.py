"""Configuration management using pydantic-settings"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    database_path: str = Field(default="./data/contracts.db", description="Path to SQLite database")
    log_level: str = Field(default="INFO", description="Logging level")

    # API settings
    api_host: str = Field(default="127.0.0.1", description="Host the API server binds to")
    api_port: int = Field(default=8000, description="Port the API server listens on")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    """Get application settings"""
    return Settings()
