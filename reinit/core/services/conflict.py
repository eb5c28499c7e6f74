"""
Conflict resolver — decide what to do when the destination exists.

Entered only after a probe found the destination. Returns the path to
write to, or None when the write must be skipped. A single existence
observation is made per candidate; nothing is locked.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from reinit.core.services.prompts import Selector

logger = logging.getLogger(__name__)

# Labels offered by the "prompt" behaviour, mapped onto terminal behaviours
PROMPT_CHOICES: dict[str, str] = {
    "overwrite": "rewrite",
    "skip": "skip",
    "attach-index": "attach-index",
}


def _indexed_candidate(path: Path, index: int) -> Path:
    # name.ext -> name.N.ext; dotfiles and extensionless names get .N appended
    if path.suffix:
        return path.with_name(f"{path.stem}.{index}{path.suffix}")
    return path.with_name(f"{path.name}.{index}")


def _attach_index_sync(path: Path) -> Path:
    index = 1
    candidate = _indexed_candidate(path, index)
    while candidate.exists():
        index += 1
        candidate = _indexed_candidate(path, index)
    return candidate


async def attach_index(path: Path) -> Path:
    """Smallest ``name.N.ext`` (N >= 1) that does not exist yet."""
    new_path = await asyncio.to_thread(_attach_index_sync, path)
    logger.info("Attaching index => %s", new_path)
    return new_path


async def resolve_conflict(
    dest_path: Path,
    behaviour: str,
    selector: Selector | None = None,
    prompt_lock: asyncio.Lock | None = None,
) -> Path | None:
    """Resolve an existing destination according to ``behaviour``.

    Args:
        dest_path: Destination that is known to exist.
        behaviour: rewrite, skip, attach-index or prompt.
        selector: Required for ``prompt``.
        prompt_lock: Held around the prompt so concurrent requests never
            share the terminal.

    Returns:
        The original path, a new non-colliding path, or None to skip.

    Raises:
        ValueError: On an unknown behaviour or ``prompt`` without selector.
    """
    if behaviour == "rewrite":
        logger.warning("File exists, rewriting in-place: %s", dest_path)
        return dest_path

    if behaviour == "skip":
        logger.warning("File exists, skipping: %s", dest_path)
        return None

    if behaviour == "attach-index":
        return await attach_index(dest_path)

    if behaviour == "prompt":
        if selector is None:
            raise ValueError("prompt behaviour needs a selector")
        async with prompt_lock or asyncio.Lock():
            choice = await asyncio.to_thread(
                selector.select,
                f"File exists: {dest_path.name}. How to handle?",
                list(PROMPT_CHOICES),
            )
        if choice not in PROMPT_CHOICES:
            raise ValueError(f"Unknown conflict choice: {choice}")
        logger.info("Conflict on %s resolved by user: %s", dest_path, choice)
        return await resolve_conflict(dest_path, PROMPT_CHOICES[choice], selector)

    raise ValueError(f"Unknown destination-exists behaviour: {behaviour}")
