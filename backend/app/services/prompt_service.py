"""
Prompt Service — load prompt templates from disk and fill in placeholders.

Responsibilities:
  • Read a template file from the prompt directory
  • Fall back to the built-in DEFAULT_PROMPT when the file is unavailable
  • Substitute {{key}} placeholders with literal values
"""

from __future__ import annotations

import logging
from pathlib import Path

from app.config import settings
from app.prompts.resume_generator import DEFAULT_PROMPT

logger = logging.getLogger(__name__)


def load_prompt(name: str, prompt_dir: str | Path | None = None) -> str:
    """Read a prompt template, or return DEFAULT_PROMPT if it can't be read."""
    path = Path(prompt_dir or settings.prompt_dir) / name
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Prompt '{name}' unavailable ({e}); using built-in default")
        return DEFAULT_PROMPT


def render_template(template: str, values: dict[str, str]) -> str:
    """Replace every {{key}} in the template with its value. Unknown placeholders stay as-is."""
    for key, value in values.items():
        template = template.replace("{{" + key + "}}", value)
    return template
