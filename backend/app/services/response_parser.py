"""
Response Parser — turn a generateContent reply into structured resume data.

Two steps:
  • extract_text(): pull candidates[0].content.parts[0].text out of the reply
  • parse_response(): split off a <think> block, then read the resume JSON from
    a ```json fence, from the whole text, or wrap the raw text as a last resort
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Callable, Optional

from app.models.resume_models import ParsedResult

logger = logging.getLogger(__name__)

THINK_OPEN = "<think>"
THINK_CLOSE = "</think>"
FENCE_OPEN = "```json"
FENCE_CLOSE = "```"


# ── Extraction ───────────────────────────────────────────────────────────────


def extract_text(response: Any) -> str:
    """Return candidates[0].content.parts[0].text, or "" if the path doesn't resolve."""
    candidate = _first(_get(response, "candidates"))
    part = _first(_get(_get(candidate, "content"), "parts"))
    text = _get(part, "text")
    if isinstance(text, str):
        return text

    if not (isinstance(response, dict) and "error" in response):
        logger.warning("Could not extract text from Gemini response; using empty string")
    return ""


def _get(obj: Any, key: str) -> Any:
    return obj.get(key) if isinstance(obj, dict) else None


def _first(items: Any) -> Any:
    if isinstance(items, list) and items:
        return items[0]
    return None


# ── Parsing ──────────────────────────────────────────────────────────────────


def parse_response(text: str) -> ParsedResult:
    """
    Parse the model's reply into a ParsedResult.

    ``think`` is set only when a complete <think>...</think> block is present.
    ``data`` is always set: the first strategy in _DATA_STRATEGIES that yields
    a JSON object wins, otherwise the raw text is wrapped as {"response": text}.
    """
    think = _extract_think(text)

    for strategy in _DATA_STRATEGIES:
        data = strategy(text)
        if data is not None:
            logger.debug(f"Parsed response via {strategy.__name__}")
            return ParsedResult(think=think, data=data)

    return ParsedResult(think=think, data=_wrap_raw(text))


def _extract_think(text: str) -> Optional[str]:
    start = text.find(THINK_OPEN)
    if start == -1:
        return None
    end = text.find(THINK_CLOSE, start + len(THINK_OPEN))
    if end == -1:
        return None
    return text[start + len(THINK_OPEN):end].strip()


def _from_fenced_block(text: str) -> Optional[dict[str, Any]]:
    """Parse the body between the first ```json and the last ```."""
    start = text.find(FENCE_OPEN)
    end = text.rfind(FENCE_CLOSE)
    if start == -1 or start >= end:
        return None
    return _load_object(text[start + len(FENCE_OPEN):end].strip())


def _from_whole_text(text: str) -> Optional[dict[str, Any]]:
    """Parse the complete original text, never the fenced substring."""
    return _load_object(text)


def _wrap_raw(text: str) -> dict[str, Any]:
    return {"response": text}


def _load_object(raw: str) -> Optional[dict[str, Any]]:
    """
    Decode the leading JSON value; only objects count as a result.

    Trailing text after the object is ignored. NaN, Infinity and overflowing
    floats are rejected, since they can't be rendered back out as JSON.
    """
    try:
        value, _ = _DECODER.raw_decode(raw.lstrip())
    except ValueError:
        return None
    return value if isinstance(value, dict) else None


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {token}")


def _parse_finite_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"Float out of range: {token}")
    return value


_DECODER = json.JSONDecoder(parse_constant=_reject_constant, parse_float=_parse_finite_float)


_DATA_STRATEGIES: tuple[Callable[[str], Optional[dict[str, Any]]], ...] = (
    _from_fenced_block,
    _from_whole_text,
)
