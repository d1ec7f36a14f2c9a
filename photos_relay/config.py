import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    google_photos_base_url: str = os.getenv(
        "GOOGLE_PHOTOS_BASE_URL", "https://photoslibrary.googleapis.com/v1"
    )
    api_prefix: str = os.getenv("API_PREFIX", "/api/googlephotos")
    cors_origins: str = os.getenv("CORS_ORIGINS", "http://localhost:3000")
    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "50"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_json: bool = os.getenv("LOG_JSON", "true").lower() == "true"
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


settings = Settings()


def get_cors_origins() -> list[str]:
    return [origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()]
