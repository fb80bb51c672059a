"""
Application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from typing import Optional


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Pennywise"
    log_level: str = "INFO"

    # Database
    database_url: Optional[str] = "sqlite:///./data/db.sqlite"

    # AI Provider
    ai_provider: str = "mock"  # mock, openai, groq, xai, anthropic, openrouter, ollama, huggingface
    ai_model: Optional[str] = None  # Falls back to the provider default
    ai_base_url: Optional[str] = None  # For Ollama: http://localhost:11434
    ai_max_tokens: int = 800
    ai_temperature: float = 0.7

    # API Keys (optional based on provider)
    openai_api_key: Optional[str] = None
    groq_api_key: Optional[str] = None
    xai_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    openrouter_api_key: Optional[str] = None
    huggingface_api_key: Optional[str] = None

    # Email
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_user: Optional[str] = None
    smtp_pass: Optional[str] = None
    smtp_from: Optional[str] = None
    smtp_use_tls: bool = True
    smtp_timeout: float = 30.0
    app_url: str = "http://localhost:3000"

    # Locale
    currency_symbol: str = "₹"
    reminder_timezone: str = "UTC"

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    frontend_url: str = "http://localhost:3000"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


# Global settings instance
settings = Settings()
