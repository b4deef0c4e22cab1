"""Prompt text and input checks for the interactive loop."""

from __future__ import annotations

from typing import Optional

from minishell.chars import is_whitespace

PROMPT_PREFIX = "minishell:"
PROMPT_SUFFIX = "$ "


def make_prompt(cwd: Optional[str]) -> str:
    """Build the prompt shown before each line: name, directory and ``$ ``.

    When the current directory is unknown it is simply left out.
    """
    return f"{PROMPT_PREFIX}{cwd or ''}{PROMPT_SUFFIX}"


def is_blank(text: Optional[str]) -> bool:
    """True when *text* is missing, empty, or made only of whitespace."""
    if not text:
        return True
    return all(is_whitespace(ch) for ch in text)