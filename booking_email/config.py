"""Application configuration"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )

    # Email Service
    resend_api_key: str = ""
    email_from_address: str = "noreply@tiptop-service.ch"
    email_from_name: str = "TipTop Service"
    booking_recipient: str = "tiptopch@proton.me"
    site_name: str = "HandyMan Swiss"

    # Application Settings
    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS
    cors_allow_origin: str = "*"
    cors_allow_headers: str = "authorization, x-client-info, apikey, content-type"

    # Monitoring
    log_level: str = "INFO"

    # Rate Limiting
    rate_limit_max: int = 5
    rate_limit_window_seconds: float = 60

    @property
    def cors_headers(self) -> dict:
        """Cross-origin headers attached to every booking response"""
        return {
            "Access-Control-Allow-Origin": self.cors_allow_origin,
            "Access-Control-Allow-Headers": self.cors_allow_headers,
        }

    @property
    def is_production(self) -> bool:
        """Check if running in production"""
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development"""
        return self.environment.lower() == "development"


# Global settings instance
settings = Settings()
