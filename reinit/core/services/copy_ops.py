"""
Copy executor — copy a source file over a destination.

The destination-exists decision is made upstream, so the copy always
overwrites. A configured fallback source gets exactly one extra attempt.
"""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
from pathlib import Path

from reinit.core.errors import FallbackExhausted, ReinitError, SourceNotFound, WriteFailure

logger = logging.getLogger(__name__)


def resolve_source(source_name: str, source_base_dir: str | None = None) -> Path:
    """Join ``source_name`` onto the absolute base dir (default: cwd)."""
    base = Path(source_base_dir) if source_base_dir else Path.cwd()
    return base.resolve() / source_name


def _copy_sync(source: Path, dest_path: Path, label: str) -> None:
    if not source.exists():
        raise SourceNotFound(str(source), label=label)
    if dest_path.is_dir():
        raise WriteFailure(str(dest_path), "destination is a directory")
    try:
        dest_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, dest_path)
        shutil.copystat(source, dest_path)
    except OSError as e:
        raise WriteFailure(str(dest_path), e.strerror or str(e)) from e


def _same_file(source: Path, dest_path: Path) -> bool:
    if source == dest_path:
        return True
    # symlinked or hard-linked paths to one file
    try:
        return os.path.samefile(source, dest_path)
    except OSError:
        return False


async def copy_file(
    source_name: str,
    source_base_dir: str | None,
    dest_path: Path,
    fallback_source: str | None = None,
) -> Path:
    """Copy ``source_name`` (under ``source_base_dir``) to ``dest_path``.

    Args:
        source_name: File name relative to the base dir.
        source_base_dir: Base dir of the source; cwd when None.
        dest_path: Absolute destination path.
        fallback_source: Tried once, relative to cwd, if the primary fails.

    Returns:
        The destination path.

    Raises:
        SourceNotFound: Primary source missing and no fallback configured.
        WriteFailure: Copy failed and no fallback configured.
        FallbackExhausted: Primary and fallback both failed.
    """
    source = resolve_source(source_name, source_base_dir)

    if await asyncio.to_thread(_same_file, source, dest_path):
        logger.warning("Source path equals destination, nothing to copy: %s", source)
        return dest_path

    logger.info("Attempting copy: %s -> %s", source, dest_path)
    try:
        await asyncio.to_thread(_copy_sync, source, dest_path, "Source")
    except ReinitError as primary_err:
        if not fallback_source:
            raise

        fallback = resolve_source(fallback_source)
        logger.warning("Primary copy failed, trying fallback: %s", fallback)
        try:
            await asyncio.to_thread(_copy_sync, fallback, dest_path, "Fallback source")
        except ReinitError as fallback_err:
            raise FallbackExhausted(primary_err, fallback_err) from fallback_err

        logger.info("Fallback copy: %s -> %s", fallback, dest_path)
        return dest_path

    logger.info("Copied file: %s -> %s", source.name, dest_path)
    return dest_path
