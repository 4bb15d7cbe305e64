# growth-tracker/growth_tracker/core/config.py
from typing import List, Optional
from pydantic_settings import BaseSettings; from dotenv import load_dotenv
load_dotenv()
class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./growth_tracker.db"
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    RELOAD: bool = False
    CORS_ORIGINS: List[str] = ["http://localhost:5173"]
    # Chat assistant; disabled while no key is configured
    ASSISTANT_API_KEY: Optional[str] = None
    ASSISTANT_API_URL: str = "https://api.openai.com/v1/chat/completions"
    ASSISTANT_MODEL: str = "gpt-4o-mini"
    ASSISTANT_TIMEOUT_SECONDS: float = 30
    RECENT_ITEMS_LIMIT: int = 5
settings = Settings()
