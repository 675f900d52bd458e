import os
import logging
from pathlib import Path
from pydantic import BaseModel, Field
from typing import List
from dotenv import load_dotenv

load_dotenv()

DEFAULT_JOBS_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "jobs.json"

class Config(BaseModel):
    app_name: str = "Job Board Demo API"
    environment: str = os.getenv("APP_ENV", "development")
    api_prefix: str = os.getenv("API_PREFIX", "")
    version: str = "1.0.0"
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    request_id_header: str = "X-Request-ID"

    # Data source (re-read on every request)
    jobs_data_path: str = os.getenv("JOBS_DATA_PATH", str(DEFAULT_JOBS_DATA_PATH))

    # Demo auth: one credential pair, one static token
    demo_email: str = os.getenv("DEMO_EMAIL", "candidate@test.com")
    demo_password: str = os.getenv("DEMO_PASSWORD", "interview2024")
    demo_token: str = os.getenv("DEMO_TOKEN", "Bearer interview-token-2024")

    # Pagination
    default_page_size: int = 10
    max_page_size: int = int(os.getenv("MAX_PAGE_SIZE", "100"))

    # CORS — comma-separated origins loaded from env.
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            o.strip()
            for o in os.getenv(
                "CORS_ORIGINS",
                "http://localhost:3000,http://127.0.0.1:3000,http://[::1]:3000",
            ).split(",")
            if o.strip()
        ]
    )

settings = Config()

# --- Startup check for non-development environments ---
_logger = logging.getLogger(__name__)
if settings.environment not in ("development", "testing"):
    if settings.demo_password == "interview2024" or settings.demo_token == "Bearer interview-token-2024":
        _logger.warning("Demo credentials are still the defaults; set DEMO_PASSWORD and DEMO_TOKEN.")
