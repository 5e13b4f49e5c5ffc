from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional


# ── Request Models ──────────────────────────────────────────────────────────


class ResumeRequest(BaseModel):
    """Free-text description of the candidate, as sent by the frontend."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    user_description: str = Field(alias="userDescription")


# ── Parser Output ───────────────────────────────────────────────────────────


class ParsedResult(BaseModel):
    """Structured output from parsing the model's reply.

    ``think`` holds the model's reasoning block, if the reply had one.
    ``data`` is the resume mapping, or ``{"response": <raw text>}`` when
    nothing in the reply could be read as a JSON object.
    """

    think: Optional[str] = None
    data: dict[str, Any]
