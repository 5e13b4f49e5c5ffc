"""
Request-scoped helpers — build the Gemini client from settings.
"""

from __future__ import annotations

from fastapi import Depends

from app.config import GENERATION_CONFIG, Settings, settings
from app.services.gemini_client import GeminiClient


def get_settings() -> Settings:
    """FastAPI dependency returning the process-wide settings."""
    return settings


def get_gemini_client(app_settings: Settings = Depends(get_settings)) -> GeminiClient:
    """FastAPI dependency that builds a GeminiClient for the current request."""
    return GeminiClient(
        api_url=app_settings.gemini_api_url,
        api_key=app_settings.gemini_api_key,
        timeout=app_settings.request_timeout,
        temperature=GENERATION_CONFIG["temperature"],
        max_output_tokens=GENERATION_CONFIG["max_output_tokens"],
    )
