"""
Init request and result models — the file initialization contract.

A request describes one file to initialize. The orchestrator turns every
request into exactly one result. Failures are captured in the result,
never raised to the batch caller.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

InitBehaviour = Literal["create", "copy", "create-if-copy-failed"]
DestFileExistsBehaviour = Literal["rewrite", "skip", "attach-index", "prompt"]
InitStatus = Literal["created", "copied", "skipped", "error"]

INIT_BEHAVIOURS: tuple[str, ...] = ("create", "copy", "create-if-copy-failed")
DEST_FILE_EXISTS_BEHAVIOURS: tuple[str, ...] = ("rewrite", "skip", "attach-index", "prompt")


class InitOptions(BaseModel):
    """Per-file options.

    Attributes:
        dest_file_name:      Overrides the chosen variation as file name.
        src_copy_mode:       Base directory of copy sources (default: cwd).
        content_create_mode: Literal content used instead of the template.
        fallback_source:     Second copy source, resolved against cwd.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    dest_file_name: str | None = Field(default=None, alias="destFileName")
    src_copy_mode: str | None = Field(default=None, alias="srcCopyMode")
    content_create_mode: str | None = Field(default=None, alias="contentCreateMode")
    fallback_source: str | None = Field(default=None, alias="fallbackSource")


class InitRequest(BaseModel):
    """A request to initialize a single file.

    ``init_behaviour`` stays a plain string: an unrecognized value is
    handled like ``create-if-copy-failed``. ``None`` in either behaviour
    field means "use the config default".
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    file_type: str = Field(alias="fileType")
    dest_dir: str = Field(default=".", alias="destDir")
    init_behaviour: str | None = Field(default=None, alias="initBehaviour")
    dest_file_exists_behaviour: DestFileExistsBehaviour | None = Field(
        default=None, alias="destFileExistsBehaviour"
    )
    options: InitOptions = Field(default_factory=InitOptions)


class InitResult(BaseModel):
    """Outcome of one init request.

    ``final_path`` is set iff the file was created or copied.
    """

    requested: InitRequest
    status: InitStatus
    final_path: str | None = None
    error: str | None = None
    error_kind: str | None = None

    @model_validator(mode="after")
    def _check_final_path(self) -> InitResult:
        wrote = self.status in ("created", "copied")
        if wrote != (self.final_path is not None):
            raise ValueError(
                f"final_path must be set iff status is created/copied (status={self.status})"
            )
        return self

    @property
    def ok(self) -> bool:
        """Whether the request finished without error."""
        return self.status != "error"

    @classmethod
    def created(cls, request: InitRequest, path: str) -> InitResult:
        return cls(requested=request, status="created", final_path=path)

    @classmethod
    def copied(cls, request: InitRequest, path: str) -> InitResult:
        return cls(requested=request, status="copied", final_path=path)

    @classmethod
    def skipped(cls, request: InitRequest) -> InitResult:
        return cls(requested=request, status="skipped")

    @classmethod
    def failure(cls, request: InitRequest, error: BaseException) -> InitResult:
        """Create an error result from the exception that caused it."""
        return cls(
            requested=request,
            status="error",
            error=str(error),
            error_kind=type(error).__name__,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_type": self.requested.file_type,
            "dest_dir": self.requested.dest_dir,
            "status": self.status,
            "final_path": self.final_path,
            "error": self.error,
            "error_kind": self.error_kind,
        }
