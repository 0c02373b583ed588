from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # API Configuration
    debug: bool = False
    environment: str = "development"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_prefix: str = "/api/v1"

    # Generation
    # Active keyword ladder / template bundle: "generic" or "kiosk"
    generator_profile: str = "generic"
    # Remote text generation provider: "openai", "gemini" or "none"
    ai_provider: str = "openai"
    # Upper bound for a single remote generation attempt before falling back
    ai_timeout_seconds: float = 20.0
    kiosk_environment_label: str = "Kiosk Build 1.13.34_V_E450_prod"

    # OpenAI Configuration (secrets come from environment)
    openai_api_key: Optional[str] = None
    openai_base_url: Optional[str] = None
    openai_model: str = "gpt-4o"

    # Gemini Configuration (optional)
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-2.5-pro"

    # Database Configuration
    database_url: str = "sqlite:///./data/qa_tracker.db"

    # Security
    secret_key: str = "change-me-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7
    bcrypt_rounds: int = 12

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
