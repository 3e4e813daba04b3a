"""
Application configuration settings
"""
from pydantic_settings import BaseSettings
from typing import List


DEFAULT_VERSE_PROMPT = (
    'Based on the feeling: "{feeling}", provide ONE uplifting but less-common Bible verse. '
    'Respond ONLY as strict JSON: {"text":"<full verse text>","reference":"Book Chapter:Verse"}.'
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # App metadata
    app_name: str = "Verse API"
    app_version: str = "1.0.0"
    debug: bool = False

    # CORS settings
    allowed_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:3001",
        "http://localhost:5173",  # Vite dev server
    ]

    # Vercel deployments - set via environment variable
    # e.g., ALLOWED_ORIGINS_ENV=https://yourapp.vercel.app,https://yourdomain.com
    allowed_origins_env: str = ""

    @property
    def get_allowed_origins(self) -> List[str]:
        """Get combined allowed origins from defaults and environment"""
        origins = self.allowed_origins.copy()
        if self.allowed_origins_env:
            origins.extend([o.strip() for o in self.allowed_origins_env.split(",") if o.strip()])
        return origins

    # Gemini settings (GEMINI_API_KEY is required to serve verses)
    gemini_api_key: str = ""
    gemini_api_base: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_model: str = "gemini-1.5-flash-latest"

    # Outbound call is aborted after this many seconds
    upstream_timeout_seconds: float = 15.0

    # Prompt sent upstream; "{feeling}" is replaced with the caller's text
    verse_prompt_template: str = DEFAULT_VERSE_PROMPT

    # Environment
    api_env: str = "development"

    class Config:
        # Load from .env file for local development
        # In production (Vercel), environment variables are set directly
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Ignore extra fields in .env


# Initialize settings - will load from environment variables
try:
    settings = Settings()
except Exception as e:
    import sys
    print(f"❌ ERROR loading settings: {e}", file=sys.stderr, flush=True)
    import traceback
    traceback.print_exc(file=sys.stderr)
    # Re-raise to fail fast
    raise
