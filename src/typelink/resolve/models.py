"""Data types shared by the resolution pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path


class Tier(StrEnum):
    """Which directory of the corpus a file was discovered in."""

    CORE = "core"
    PLUGIN = "plugin"


@dataclass(frozen=True, slots=True)
class PlaceholderRef:
    """One ``any /* pkg.Type */`` occurrence in a generated file."""

    original: str
    namespace: str
    type_name: str
    line: int

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace}.{self.type_name}"

    @property
    def short_namespace(self) -> str:
        """Last dotted segment of the namespace (``github.com.x.oauth`` -> ``oauth``)."""
        return self.namespace.rsplit(".", 1)[-1]

    @property
    def short_qualified_name(self) -> str:
        return f"{self.short_namespace}.{self.type_name}"

    def describe(self) -> str:
        return f"{self.qualified_name} (line {self.line})"


@dataclass(frozen=True, slots=True)
class FileAnalysis:
    """Exports and placeholders of one generated file, taken before any rewrite."""

    path: Path
    module_tag: str
    tier: Tier
    exports: tuple[str, ...] = ()
    placeholders: tuple[PlaceholderRef, ...] = ()

    @property
    def file_name(self) -> str:
        return self.path.name


@dataclass(frozen=True, slots=True)
class IndexEntry:
    """Where a qualified type name is declared."""

    path: Path
    export_name: str
    module_tag: str


@dataclass(frozen=True, slots=True)
class ImportSpec:
    """One imported binding: ``export_name`` or ``export_name as alias``."""

    export_name: str
    alias: str | None = None

    @property
    def local_name(self) -> str:
        return self.alias or self.export_name


class Outcome(StrEnum):
    """How a single placeholder was handled."""

    BUILTIN = "builtin"
    SAME_FILE = "same_file"
    CROSS_FILE = "cross_file"
    UNRESOLVED = "unresolved"


@dataclass(slots=True)
class ResolutionReport:
    """Per-file resolver result, accumulated while placeholders are processed.

    ``imports`` maps producer path -> export name -> spec, in first-use order.
    """

    outcomes: list[tuple[PlaceholderRef, Outcome]] = field(default_factory=list)
    imports: dict[Path, dict[str, ImportSpec]] = field(default_factory=dict)
    unresolved: list[str] = field(default_factory=list)

    @property
    def resolved(self) -> int:
        return sum(1 for _, outcome in self.outcomes if outcome is not Outcome.UNRESOLVED)


@dataclass(slots=True)
class FileReport:
    """Everything that happened to one file during a pass."""

    path: Path
    structural_fixes: int = 0
    injected: bool = False
    resolved: int = 0
    unresolved: list[str] = field(default_factory=list)
    imports_added: int = 0
    written: bool = False

    @property
    def file_name(self) -> str:
        return self.path.name

    @property
    def changed(self) -> bool:
        return self.resolved > 0 or self.structural_fixes > 0 or self.injected

    @property
    def has_activity(self) -> bool:
        return self.changed or bool(self.unresolved)


@dataclass(slots=True)
class PassReport:
    """Aggregate result of one resolution pass over the corpus."""

    dry_run: bool
    files_scanned: int = 0
    index_size: int = 0
    files: list[FileReport] = field(default_factory=list)

    @property
    def total_resolved(self) -> int:
        return sum(f.resolved for f in self.files)

    @property
    def total_structural_fixes(self) -> int:
        return sum(f.structural_fixes for f in self.files)

    @property
    def files_written(self) -> int:
        return sum(1 for f in self.files if f.written)

    @property
    def unresolved(self) -> list[str]:
        """All unresolved references, prefixed with their file name."""
        return [f"{f.file_name}: {u}" for f in self.files for u in f.unresolved]
