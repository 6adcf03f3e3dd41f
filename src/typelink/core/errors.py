"""Typelink error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Corpus (generated file discovery and I/O)

Unresolved placeholders are not errors. They are reported, never raised.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Corpus (3xxx)
    CORPUS_DIR_NOT_FOUND = 3001
    CORPUS_READ_FAILED = 3002
    CORPUS_WRITE_FAILED = 3003


# No slots: a slotted frozen dataclass breaks `__traceback__` assignment
# when the error crosses a @contextmanager boundary.
@dataclass(frozen=True)
class TypelinkError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(TypelinkError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class CorpusError(TypelinkError):
    """Generated corpus discovery and file I/O errors.

    Any of these aborts the whole pass. Files already written stay written;
    the pass is idempotent, so re-running after fixing the cause is safe.
    """

    @classmethod
    def dir_not_found(cls, path: str) -> "CorpusError":
        return cls(
            code=ErrorCode.CORPUS_DIR_NOT_FOUND,
            message=f"Generated directory not found: {path}",
            details={"path": path},
        )

    @classmethod
    def read_failed(cls, path: str, reason: str) -> "CorpusError":
        return cls(
            code=ErrorCode.CORPUS_READ_FAILED,
            message=f"Failed to read {path}: {reason}",
            retryable=True,
            details={"path": path, "reason": reason},
        )

    @classmethod
    def write_failed(cls, path: str, reason: str) -> "CorpusError":
        return cls(
            code=ErrorCode.CORPUS_WRITE_FAILED,
            message=f"Failed to write {path}: {reason}",
            retryable=True,
            details={"path": path, "reason": reason},
        )
