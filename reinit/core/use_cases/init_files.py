"""
Init use case — resolve init requests end to end.

Pipeline for one request:
    variations -> pick one -> destination path -> conflict -> copy | create

Every request yields exactly one InitResult. Per-request failures are
captured in the result; a batch never stops because one file failed.
The ``on_file_start`` / ``on_file_complete`` hooks are the exception:
they are called outside the capture, so whatever they raise reaches
the caller.
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path, PurePath
from typing import Any, Iterable

from reinit.core.config.loader import load_config
from reinit.core.errors import ReinitError
from reinit.core.models.config import ReinitConfig
from reinit.core.models.request import InitRequest, InitResult
from reinit.core.services.conflict import resolve_conflict
from reinit.core.services.copy_ops import copy_file
from reinit.core.services.generators.content import create_file_from_scratch
from reinit.core.services.prompts import ClickSelector, Selector
from reinit.core.services.registry import lookup

logger = logging.getLogger(__name__)


async def init_file(
    request: InitRequest,
    config: ReinitConfig | None = None,
    selector: Selector | None = None,
    *,
    prompt_lock: asyncio.Lock | None = None,
) -> InitResult:
    """Initialize a single file.

    Args:
        request: What to initialize and where.
        config: Resolved config; loaded from disk when None.
        selector: Interactive chooser; terminal prompts when None.
        prompt_lock: Serializes selector calls across a parallel batch.

    Returns:
        InitResult with status created, copied, skipped or error.
    """
    cfg = config if config is not None else load_config()
    selector = selector if selector is not None else ClickSelector()
    prompt_lock = prompt_lock if prompt_lock is not None else asyncio.Lock()

    init_behaviour = request.init_behaviour or cfg.default_init_behaviour
    exists_behaviour = (
        request.dest_file_exists_behaviour or cfg.default_dest_file_exists_behaviour
    )

    if cfg.on_file_start is not None:
        cfg.on_file_start(request)

    try:
        result = await _do_init_file(
            request, init_behaviour, exists_behaviour, selector, prompt_lock
        )
    except Exception as e:  # noqa: BLE001
        logger.error("Failed to init %s: %s", request.file_type, e)
        logger.debug("Init failure details", exc_info=True)
        result = InitResult.failure(request, e)

    if cfg.on_file_complete is not None:
        cfg.on_file_complete(result)

    return result


async def init_files(
    requests: Iterable[InitRequest],
    *,
    parallel: bool | None = None,
    concurrency: int | None = None,
    config: ReinitConfig | None = None,
    selector: Selector | None = None,
) -> list[InitResult]:
    """Initialize several files, sequentially or with bounded concurrency.

    Args:
        requests: Requests to resolve.
        parallel: Run concurrently; config ``parallel_by_default`` when None.
        concurrency: Max requests in flight; config value when None.
        config: Resolved config; loaded once for the whole batch when None.
        selector: Shared interactive chooser.

    Returns:
        One result per request, in input order.

    Raises:
        ValueError: If the concurrency limit is below 1.
    """
    cfg = config if config is not None else load_config()
    selector = selector if selector is not None else ClickSelector()
    items = list(requests)

    run_parallel = cfg.parallel_by_default if parallel is None else parallel
    limit = cfg.parallel_concurrency if concurrency is None else concurrency
    if limit < 1:
        raise ValueError(f"concurrency must be at least 1, got {limit}")

    if not run_parallel:
        results: list[InitResult] = []
        for item in items:
            results.append(await init_file(item, cfg, selector))
        return results

    logger.info("Initializing %d file(s), up to %d at a time", len(items), limit)

    # Completion order differs from submission order; write by index
    slots: list[InitResult | None] = [None] * len(items)
    gate = asyncio.Semaphore(limit)
    # One terminal: prompts from concurrent requests take turns
    prompt_lock = asyncio.Lock()

    async def _worker(index: int, item: InitRequest) -> None:
        async with gate:
            slots[index] = await init_file(item, cfg, selector, prompt_lock=prompt_lock)

    await asyncio.gather(*(_worker(i, item) for i, item in enumerate(items)))
    return [result for result in slots if result is not None]


def init_file_sync(
    request: InitRequest,
    config: ReinitConfig | None = None,
    selector: Selector | None = None,
) -> InitResult:
    """Blocking wrapper around ``init_file``."""
    return asyncio.run(init_file(request, config, selector))


def init_files_sync(
    requests: Iterable[InitRequest],
    **kwargs: Any,
) -> list[InitResult]:
    """Blocking wrapper around ``init_files``."""
    return asyncio.run(init_files(requests, **kwargs))


def summarize(results: list[InitResult]) -> dict[str, int]:
    """Count results per status."""
    counts = {"created": 0, "copied": 0, "skipped": 0, "error": 0}
    for result in results:
        counts[result.status] += 1
    return counts


# ── Pipeline steps ──────────────────────────────────────────────


async def _do_init_file(
    request: InitRequest,
    init_behaviour: str,
    exists_behaviour: str,
    selector: Selector,
    prompt_lock: asyncio.Lock,
) -> InitResult:
    variations = lookup(request.file_type)

    if len(variations) == 1:
        variation = variations[0]
    else:
        async with prompt_lock:
            variation = await asyncio.to_thread(
                selector.select,
                f"Select variation for {request.file_type}",
                list(variations),
            )
        logger.info("Selected variation %s for %s", variation, request.file_type)

    file_name = _relative_name(request.options.dest_file_name or variation)
    dest_dir = Path(os.path.abspath(request.dest_dir or "."))
    dest_path = dest_dir / file_name

    logger.info(
        "Preparing to init %s (variation %s) at %s",
        request.file_type, variation, dest_path,
    )

    if await asyncio.to_thread(dest_path.exists):
        logger.warning("Destination exists: %s (%s)", dest_path, exists_behaviour)
        resolved = await resolve_conflict(
            dest_path, exists_behaviour, selector, prompt_lock
        )
        if resolved is None:
            return InitResult.skipped(request)
        dest_path = resolved

    return await _finalize(request, init_behaviour, variation, dest_path)


def _relative_name(name: str) -> PurePath:
    # An absolute name would replace dest_dir in the join; keep it underneath
    path = PurePath(name)
    if path.anchor:
        return path.relative_to(path.anchor)
    return path


async def _finalize(
    request: InitRequest,
    init_behaviour: str,
    variation: str,
    dest_path: Path,
) -> InitResult:
    if init_behaviour == "copy":
        return await _run_copy(request, variation, dest_path)

    if init_behaviour == "create":
        return await _run_create(request, dest_path)

    if init_behaviour != "create-if-copy-failed":
        logger.warning(
            "Unknown init behaviour %r, using create-if-copy-failed", init_behaviour
        )

    try:
        return await _run_copy(request, variation, dest_path)
    except ReinitError as e:
        logger.warning("Copy failed for %s (%s), falling back to create", variation, e)
        return await _run_create(request, dest_path)


async def _run_copy(request: InitRequest, variation: str, dest_path: Path) -> InitResult:
    opts = request.options
    final = await copy_file(
        variation,
        opts.src_copy_mode,
        dest_path,
        fallback_source=opts.fallback_source,
    )
    return InitResult.copied(request, str(final))


async def _run_create(request: InitRequest, dest_path: Path) -> InitResult:
    final = await create_file_from_scratch(
        dest_path,
        request.file_type,
        request.options.content_create_mode,
    )
    return InitResult.created(request, str(final))
