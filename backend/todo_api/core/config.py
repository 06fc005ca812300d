from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "Todo RPC API"
    APP_VERSION: str = "1.0.0"
    API_V1_PREFIX: str = "/api/v1"

    # browser clients allowed to call the RPC boundary
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8501"]

    # DB
    DATABASE_URL: str = "sqlite:///./todo.db"
    DB_ECHO: bool = False

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
