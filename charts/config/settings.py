"""Application settings and configuration"""

from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "Charts"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Chart defaults
    CHART_DEFAULT_YEAR: Optional[int] = None  # None means the current year
    CHART_MAX_ENCODED_LENGTH: int = 128  # 1 version char + 64 base64 chars covers a full leap year
    CHART_SHARE_QUERY_PARAM: str = "s"

    # HTTP
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields in .env


settings = Settings()
