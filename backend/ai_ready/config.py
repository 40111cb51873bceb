"""
Application configuration using environment variables.
"""
import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()

@dataclass
class Settings:
    """Application settings."""
    APP_NAME: str = "AI Readiness Scanner"
    APP_VERSION: str = "1.0.0"

    # API Keys
    FIRECRAWL_API_KEY: str = os.getenv("FIRECRAWL_API_KEY", "")
    GOOGLE_API_KEY: str = os.getenv("GOOGLE_API_KEY", "")

    # Firecrawl settings
    FIRECRAWL_TIMEOUT: int = int(os.getenv("FIRECRAWL_TIMEOUT", "30"))

    # Gemini settings
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash-lite")
    PROMPT_EXCERPT_CHARS: int = int(os.getenv("PROMPT_EXCERPT_CHARS", "4000"))

    # HTTP client settings
    HTTP_TIMEOUT: int = int(os.getenv("HTTP_TIMEOUT", "15"))
    HTTP_MAX_REDIRECTS: int = int(os.getenv("HTTP_MAX_REDIRECTS", "5"))

    # Auxiliary file probes (seconds, per request)
    PROBE_TIMEOUT: float = float(os.getenv("PROBE_TIMEOUT", "3.0"))

    # Report
    HTML_PREVIEW_CHARS: int = int(os.getenv("HTML_PREVIEW_CHARS", "10000"))

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"])

settings = Settings()
