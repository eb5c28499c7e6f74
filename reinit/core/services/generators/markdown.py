"""
Markdown helpers for templates.
"""

from __future__ import annotations

_FENCE_PLACEHOLDER = "'''"
_FENCE = "```"


def escape_markdown_code_blocks(text: str) -> str:
    """Turn ''' placeholder fences into real ``` fences.

    Templates use ''' so they can live inside Python string literals
    without clashing with docstrings. Idempotent: text without '''
    comes back unchanged.
    """
    return text.replace(_FENCE_PLACEHOLDER, _FENCE)
