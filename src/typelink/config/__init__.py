"""Config module exports."""

from typelink.config.loader import load_config, resolve_generated_dir
from typelink.config.models import (
    CorpusConfig,
    LoggingConfig,
    ResolveConfig,
    TypelinkConfig,
)

__all__ = [
    "load_config",
    "resolve_generated_dir",
    "TypelinkConfig",
    "CorpusConfig",
    "ResolveConfig",
    "LoggingConfig",
]
