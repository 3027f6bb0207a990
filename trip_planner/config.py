import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from dotenv import load_dotenv
load_dotenv()

class Settings(BaseSettings):
    # Application Settings
    allowed_origins: List[str] = ["http://localhost:3000"]
    log_level: str = "INFO"
    port: int = 8080

    # Model service (Gemini)
    google_api_key: str = ""
    llm_model: str = "gemini-2.5-flash"
    llm_temperature: float = 0.7
    llm_top_p: float = 0.95
    llm_max_output_tokens: int = 8000
    llm_timeout_seconds: float = 120

    # Local itinerary storage
    itinerary_store_path: str = "saved_itineraries.json"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore"  # Allow extra environment variables without validation errors
    )

class CloudRunConfig:
    """Configuration for Cloud Run deployment"""

    IS_CLOUD_RUN: bool = os.getenv("K_SERVICE") is not None
    PORT: int = int(os.getenv("PORT", "8080"))


settings = Settings()
cloud_config = CloudRunConfig()


def get_settings() -> Settings:
    """FastAPI dependency returning the process-wide settings"""
    return settings
