"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TYPELINK__SECTION__KEY)
3. Project YAML (typelink.yaml in the project root)
4. Global YAML (~/.config/typelink/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    TYPELINK__<SECTION>__<KEY>=<VALUE>

Examples:
    TYPELINK__LOGGING__LEVEL=DEBUG
    TYPELINK__CORPUS__GENERATED_DIR=src/generated
    TYPELINK__RESOLVE__UNRESOLVED_REPORT_LIMIT=50
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from typelink.config.constants import (
    DEFAULT_BANNER,
    DEFAULT_EXCLUDED_SUFFIXES,
    DEFAULT_FAMILY_PREFIXES,
    DEFAULT_FILE_SUFFIX,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        TYPELINK__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. The Rich report is printed regardless of this.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class CorpusConfig(BaseModel):
    """Where the generated declaration files live and how they look.

    Env vars:
        TYPELINK__CORPUS__GENERATED_DIR: Primary (core tier) directory
        TYPELINK__CORPUS__PLUGINS_SUBDIR: Secondary (plugin tier) subdirectory name
    """

    generated_dir: str = Field(
        default="src/generated",
        description="Primary directory of generated files. Relative paths are "
        "resolved against the project root.",
    )
    plugins_subdir: str = Field(
        default="plugins",
        description="Secondary directory, relative to generated_dir. Absence is tolerated.",
    )
    file_suffix: str = Field(
        default=DEFAULT_FILE_SUFFIX,
        description="Only files with this suffix are analyzed.",
    )
    excluded_suffixes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDED_SUFFIXES),
        description="Files ending in any of these are skipped (schema companions).",
    )
    banner: str = Field(
        default=DEFAULT_BANNER,
        description="Comment line the generator writes verbatim into every file. "
        "Imports and synthetic declarations are spliced after it.",
    )
    family_prefixes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FAMILY_PREFIXES),
        description="Filename prefixes stripped to derive a file's module tag.",
    )

    @field_validator("file_suffix")
    @classmethod
    def validate_file_suffix(cls, v: str) -> str:
        if not v.startswith("."):
            raise ValueError(f"File suffix must start with '.': {v}")
        return v

    @field_validator("banner")
    @classmethod
    def validate_banner(cls, v: str) -> str:
        if not v.strip() or "\n" in v:
            raise ValueError("Banner must be a single non-empty line")
        return v


class ResolveConfig(BaseModel):
    """Resolution table extensions and report limits.

    Env vars:
        TYPELINK__RESOLVE__UNRESOLVED_REPORT_LIMIT: Unresolved references listed in the report
    """

    extra_builtins: dict[str, str] = Field(
        default_factory=dict,
        description="Qualified name -> inline expression, layered over the built-in table. "
        "Use this to silence unresolved references to platform types.",
    )
    extra_namespaces: dict[str, str] = Field(
        default_factory=dict,
        description="Namespace -> generated filename, layered over the built-in registry.",
    )
    unresolved_report_limit: int = Field(
        default=20,
        description="How many unresolved references the summary lists before truncating.",
    )

    @field_validator("unresolved_report_limit")
    @classmethod
    def validate_limit(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"Report limit must be >= 0, got {v}")
        return v


class TypelinkConfig(BaseModel):
    """Root configuration for typelink."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    corpus: CorpusConfig = Field(default_factory=CorpusConfig)
    resolve: ResolveConfig = Field(default_factory=ResolveConfig)
