from pathlib import Path

from pydantic_settings import BaseSettings


PROMPTS_DIR = Path(__file__).resolve().parent / "prompts"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "Resume Generator"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # CORS (any origin may call the generate endpoint)
    cors_origins: list[str] = ["*"]

    # Gemini: the key is appended verbatim, so the URL ends in "?key="
    gemini_api_url: str = (
        "https://generativelanguage.googleapis.com/v1beta/models/"
        "gemini-2.0-flash:generateContent?key="
    )
    gemini_api_key: str = ""
    request_timeout: float = 30.0

    # Prompts
    prompt_dir: str = str(PROMPTS_DIR)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


# ── Generation Configuration ────────────────────────────────────────────────

GENERATION_CONFIG = {
    "temperature": 0.7,
    "max_output_tokens": 2048,
}
