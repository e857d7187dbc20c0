"""
System instruction loading.
"""

import logging
from pathlib import Path

from backend.config import Settings
from backend.constants import SYSTEM_PROMPT


def load_system_prompt(settings: Settings) -> str:
    """
    Return the system instruction sent with every review.

    When SYSTEM_PROMPT_FILE is set the file content replaces the built-in
    prompt. A missing or empty file is a configuration error and raises.
    """
    if not settings.SYSTEM_PROMPT_FILE:
        return SYSTEM_PROMPT

    path = Path(settings.SYSTEM_PROMPT_FILE).expanduser()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logging.error(f"Failed to read system prompt file {path}: {e}")
        raise RuntimeError(f"System prompt file not readable: {path}") from e

    if not text.strip():
        raise RuntimeError(f"System prompt file is empty: {path}")

    logging.info(f"Loaded system prompt from {path}")
    return text


def build_contents(code: str) -> list[str]:
    """User content for a single review turn."""
    return [f"\n{code}\n"]
