"""Cross-package type reference resolution for generated declaration files."""

from typelink.resolve.models import (
    FileAnalysis,
    FileReport,
    ImportSpec,
    IndexEntry,
    Outcome,
    PassReport,
    PlaceholderRef,
    ResolutionReport,
    Tier,
)
from typelink.resolve.ops import discover_files, rewrite_content, run_pass
from typelink.resolve.tables import ResolverTables, build_tables

__all__ = [
    "FileAnalysis",
    "FileReport",
    "ImportSpec",
    "IndexEntry",
    "Outcome",
    "PassReport",
    "PlaceholderRef",
    "ResolutionReport",
    "ResolverTables",
    "Tier",
    "build_tables",
    "discover_files",
    "rewrite_content",
    "run_pass",
]
