from pydantic_settings import BaseSettings
from pydantic import BaseModel, Field, field_validator
from typing import Optional


class LegacyApiConfig(BaseModel):
    """Connection and retry settings for the legacy candidate system"""

    base_url: Optional[str] = None
    api_key: str = ""
    retries: int = Field(3, ge=1, description="Maximum number of POST attempts")
    backoff_ms: int = Field(1000, ge=0, description="Wait before retry n is backoff_ms * n")
    timeout: float = Field(30.0, gt=0, description="Per-request timeout in seconds")


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # API Settings
    API_PREFIX: str = ""
    PROJECT_NAME: str = "Recruitment API"
    VERSION: str = "1.0.0"
    PORT: int = 3000

    # Database Settings
    DATABASE_URL: str = "sqlite:///./recruitment.db"

    # Legacy system settings
    LEGACY_API_URL: Optional[str] = None
    LEGACY_API_KEY: str = ""
    LEGACY_API_RETRIES: int = Field(3, ge=1)
    LEGACY_API_BACKOFF_MS: int = Field(1000, ge=0)
    LEGACY_API_TIMEOUT: float = Field(30.0, gt=0)

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = True

    @field_validator("LEGACY_API_URL", mode="before")
    @classmethod
    def blank_url_is_unset(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty LEGACY_API_URL as not configured"""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def legacy_config(self) -> LegacyApiConfig:
        return LegacyApiConfig(
            base_url=self.LEGACY_API_URL,
            api_key=self.LEGACY_API_KEY,
            retries=self.LEGACY_API_RETRIES,
            backoff_ms=self.LEGACY_API_BACKOFF_MS,
            timeout=self.LEGACY_API_TIMEOUT,
        )

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
