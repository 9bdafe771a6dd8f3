from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # Application
    APP_NAME: str = "PrepFlow"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    API_V1_PREFIX: str = "/api/v1"
    
    # Database - local SQLite file by default, PostgreSQL also supported
    DATABASE_URL: str = "sqlite:///./prepflow.db"
    
    # Query defaults
    DEFAULT_RECENT_LIMIT: int = 5
    DEFAULT_MISTAKE_LIMIT: int = 10
    DEFAULT_TREND_COUNT: int = 10
    
    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields in .env

@lru_cache()
def get_settings() -> Settings:
    return Settings()
