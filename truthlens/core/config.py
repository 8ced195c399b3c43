import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional
from dotenv import load_dotenv


load_dotenv()  # Load environment variables from a .env file if present

class Config(BaseSettings):
    """
    Application configuration settings.
    Reads from environment variables by default.
    """
    PROJECT_NAME: str = "TruthLens API"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # Server Settings
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "5000"))
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Result Store Settings
    RESULT_STORE_BACKEND: str = os.getenv("RESULT_STORE_BACKEND", "memory")  # memory | redis
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    RESULT_KEY_PREFIX: str = "truthlens:analysis:"

    # Scoring Settings
    ANALYSIS_DELAY: float = 0.0  # seconds of artificial latency per analysis
    SCORING_SEED: Optional[int] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )


config = Config()
