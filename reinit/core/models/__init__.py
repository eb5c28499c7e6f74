"""
Domain models — Pydantic types for reinit.

All models are re-exported here for convenient access:

    from reinit.core.models import InitRequest, InitResult, ReinitConfig
"""

from reinit.core.models.config import ReinitConfig
from reinit.core.models.file_type import FileTypeDescriptor
from reinit.core.models.request import (
    DEST_FILE_EXISTS_BEHAVIOURS,
    INIT_BEHAVIOURS,
    DestFileExistsBehaviour,
    InitBehaviour,
    InitOptions,
    InitRequest,
    InitResult,
    InitStatus,
)

__all__ = [
    "DEST_FILE_EXISTS_BEHAVIOURS",
    "DestFileExistsBehaviour",
    # file_type.py
    "FileTypeDescriptor",
    "INIT_BEHAVIOURS",
    "InitBehaviour",
    # request.py
    "InitOptions",
    "InitRequest",
    "InitResult",
    "InitStatus",
    # config.py
    "ReinitConfig",
]
