"""
Content provider — pick the bytes for a file created from scratch.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from reinit.core.errors import WriteFailure
from reinit.core.services.generators.gitignore import GITIGNORE_TEMPLATE
from reinit.core.services.generators.license import render_license
from reinit.core.services.generators.markdown import escape_markdown_code_blocks
from reinit.core.services.generators.readme import README_TEMPLATE

logger = logging.getLogger(__name__)


def _placeholder(file_type: str) -> str:
    return f"// Auto-generated file for type: {file_type}"


_GENERATORS = {
    "md:LICENSE": render_license,
    "md:README": lambda: escape_markdown_code_blocks(README_TEMPLATE),
    "git:gitignore": lambda: GITIGNORE_TEMPLATE,
}


def materialize(file_type: str, explicit_content: str | None = None) -> bytes:
    """Return the content for a new file of ``file_type``.

    Args:
        file_type: Exact file type identifier (case-sensitive).
        explicit_content: Wins over any template when non-empty.

    Returns:
        UTF-8 encoded content. Unknown types get a placeholder comment.
    """
    if explicit_content:
        return explicit_content.encode("utf-8")

    generator = _GENERATORS.get(file_type)
    text = generator() if generator else _placeholder(file_type)
    return text.encode("utf-8")


def _write_sync(dest_path: Path, data: bytes) -> None:
    try:
        dest_path.parent.mkdir(parents=True, exist_ok=True)
        dest_path.write_bytes(data)
    except OSError as e:
        raise WriteFailure(str(dest_path), e.strerror or str(e)) from e


async def create_file_from_scratch(
    dest_path: Path,
    file_type: str,
    explicit_content: str | None = None,
) -> Path:
    """Write generated content to ``dest_path``, creating parent dirs.

    Raises:
        WriteFailure: If a directory or the file cannot be written.
    """
    data = materialize(file_type, explicit_content)
    if explicit_content:
        logger.info("Using custom content for file %s", dest_path)

    await asyncio.to_thread(_write_sync, dest_path, data)
    logger.info("Created file from scratch: %s", dest_path)
    return dest_path
