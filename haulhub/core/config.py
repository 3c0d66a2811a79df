from typing import Optional
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    REDIS_URL: Optional[str] = None

    RATE_LIMIT: int = 100
    RATE_LIMIT_WINDOW: int = 600  # 10 minutes

    IDEMPOTENCY_TTL: int = 300  # 5 minutes
    PRICE_CACHE_TTL: int = 60   # 60 seconds

    WEBHOOK_URL: Optional[str] = None
    WEBHOOK_TIMEOUT: int = 10
    WEBHOOK_RETRIES: int = 3

    STABLECOIN_SYMBOL: str = "USDC"

    API_TITLE: str = "HaulHub Pricing Service"
    API_DESCRIPTION: str = "Regional delivery pricing and job posting for the HaulHub marketplace"
    API_VERSION: str = "1.0.0"

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
