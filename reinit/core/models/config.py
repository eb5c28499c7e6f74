"""
Resolved configuration — defaults applied to every init request.

Loaded once per batch by ``reinit.core.config.loader`` unless the caller
passes one in explicitly.
"""

from __future__ import annotations

from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

from reinit.core.models.request import DestFileExistsBehaviour, InitBehaviour

# Hook signatures: on_file_start(request), on_file_complete(result)
FileHook = Callable[[Any], Any]


class ReinitConfig(BaseModel):
    """Merged reinit settings.

    Hooks are best-effort side channels. Their exceptions are NOT caught
    by the orchestrator: they propagate to the caller and abort the batch.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    default_init_behaviour: InitBehaviour = Field(
        default="create", alias="defaultInitBehaviour"
    )
    default_dest_file_exists_behaviour: DestFileExistsBehaviour = Field(
        default="prompt", alias="defaultDestFileExistsBehaviour"
    )
    parallel_by_default: bool = Field(default=False, alias="parallelByDefault")
    parallel_concurrency: int = Field(default=4, ge=1, alias="parallelConcurrency")

    on_file_start: FileHook | None = Field(default=None, alias="onFileStart")
    on_file_complete: FileHook | None = Field(default=None, alias="onFileComplete")
