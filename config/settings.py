"""
Application settings loaded from environment variables.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Server ───────────────────────────────────────────────────────────
    port: int = 8000
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: list = ["*"]

    # ── Outbound HTTP ────────────────────────────────────────────────────
    http_timeout_seconds: float = 30.0   # per-request timeout for provider calls

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }


config = Settings()
