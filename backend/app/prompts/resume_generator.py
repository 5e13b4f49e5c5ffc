"""
Prompt #1 — Resume Generator

Turns a free-text description of a candidate into a resume.
Temperature: 0.7 | Max tokens: 2048

The full template lives in ``resume_prompt.txt`` next to this module.
DEFAULT_PROMPT is what we send when that file cannot be read.
"""

PROMPT_FILE = "resume_prompt.txt"

PLACEHOLDER = "userDescription"

DEFAULT_PROMPT = (
    "Based on this description: {{userDescription}}, generate a professional "
    "resume in JSON format with personalInfo, experience, education, skills, "
    "and projects sections."
)
