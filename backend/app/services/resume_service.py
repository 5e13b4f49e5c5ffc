"""
Resume Service — generate a resume from a free-text description.

Responsibilities:
  • Load the resume prompt template and fill in the user's description
  • Send it to Gemini through the injected GeminiClient
  • Extract the reply text and parse it into structured resume data
"""

from __future__ import annotations

import json
import logging

from app.models.resume_models import ParsedResult
from app.prompts.resume_generator import PLACEHOLDER, PROMPT_FILE
from app.services.gemini_client import GeminiClient
from app.services.prompt_service import load_prompt, render_template
from app.services.response_parser import extract_text, parse_response

logger = logging.getLogger(__name__)


# ── Public API ───────────────────────────────────────────────────────────────


async def generate_resume_response(
    user_description: str,
    *,
    client: GeminiClient,
    prompt_name: str = PROMPT_FILE,
) -> ParsedResult:
    """Run the full pipeline. Never raises; failures degrade into the returned data."""
    template = load_prompt(prompt_name)
    prompt = render_template(template, {PLACEHOLDER: user_description})

    logger.info(f"Generating resume from description ({len(user_description)} chars)")

    response = await client.generate(prompt)
    text = extract_text(response)

    # An error envelope goes through the parser like any other reply
    if not text and "error" in response:
        text = json.dumps(response)

    parsed = parse_response(text)
    if parsed.think:
        logger.debug(f"Model reasoning: {parsed.think}")

    logger.info(f"Resume generated: keys={sorted(parsed.data)}")
    return parsed
