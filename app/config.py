"""Application configuration"""
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application settings"""

    # Application
    environment: str = "development"
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Endpoints the forms post to
    business_form_url: str = "http://localhost:5000/api/business"
    contact_form_url: str = "https://backendtest1-psi.vercel.app/api/contact"

    # Downstream automation (n8n) webhooks the relay forwards to
    business_webhook_url: Optional[str] = None
    contact_webhook_url: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
