"""Core module exports."""

from typelink.core.errors import (
    ConfigError,
    CorpusError,
    ErrorCode,
    TypelinkError,
)
from typelink.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)
from typelink.core.progress import pluralize, spinner, status

__all__ = [
    # Errors
    "TypelinkError",
    "ConfigError",
    "CorpusError",
    "ErrorCode",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
    # Progress
    "pluralize",
    "spinner",
    "status",
]
