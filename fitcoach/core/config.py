from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    DATABASE_URL: str | None = None
    ENVIRONMENT: str = "local"
    LOG_LEVEL: str = "INFO"

    # Local timezone used to snap requested periods to whole days
    TIMEZONE: str = "UTC"

    # Default trailing windows when from/to are omitted
    WEEKLY_REVIEW_SPAN_DAYS: int = 7
    STATS_OVERVIEW_SPAN_DAYS: int = 30

    # OpenAI-compatible chat completion endpoint (Groq by default)
    AI_API_BASE: str = "https://api.groq.com/openai/v1"
    AI_API_KEY: str | None = None
    AI_MODEL: str = "llama-3.3-70b-versatile"
    AI_TIMEOUT_SECONDS: float = 30.0


settings = Settings()
