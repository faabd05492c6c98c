from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Electro Stock"
    DATABASE_URL: str = "sqlite:///./electrostock.db"

    LOG_LEVEL: str = "INFO"

    # Items at or below this quantity are flagged for reorder
    LOW_STOCK_THRESHOLD: int = 5

    # Load the demo catalog when nothing has been saved yet
    SEED_ON_EMPTY: bool = True

    # Generative advisory service (Gemini REST API)
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-3-flash-preview"
    GEMINI_API_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    ADVISORY_TIMEOUT_SECONDS: float = 30.0

    model_config = {"env_file": ".env"}


settings = Settings()
