"""Global Type Index - qualified name -> declaring file and symbol.

Built once per pass from every File Analysis, read-only afterwards.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType

import structlog

from typelink.resolve.models import FileAnalysis, IndexEntry
from typelink.resolve.tables import ResolverTables

log = structlog.get_logger(__name__)


class TypeIndex(Mapping[str, IndexEntry]):
    """Read-only ``namespace.TypeName`` lookup table."""

    def __init__(self, entries: dict[str, IndexEntry]) -> None:
        self._entries = MappingProxyType(dict(entries))
        self._sorted_keys = tuple(sorted(self._entries))

    def __getitem__(self, key: str) -> IndexEntry:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, *keys: str) -> IndexEntry | None:
        """First entry found among keys, tried in order."""
        for key in keys:
            if (entry := self._entries.get(key)) is not None:
                return entry
        return None

    def find_by_suffix(self, prefix: str, type_name: str) -> IndexEntry | None:
        """Any key starting with prefix and ending in ``.type_name``.

        Several keys can match (``caddy`` also prefixes ``caddyhttp.*``);
        the lexicographically smallest key wins.
        """
        suffix = f".{type_name}"
        for key in self._sorted_keys:
            if key.startswith(prefix) and key.endswith(suffix):
                return self._entries[key]
        return None


def build_type_index(
    analyses: Sequence[FileAnalysis],
    tables: ResolverTables,
) -> TypeIndex:
    """Merge analyses and the namespace registry into one index.

    Self-declared exports of family files come first. Registry mappings
    only fill keys still absent, so the result does not depend on the
    order of analyses.
    """
    entries: dict[str, IndexEntry] = {}

    for analysis in analyses:
        if not analysis.file_name.startswith(tables.family_prefixes):
            continue
        for export_name in analysis.exports:
            key = f"{analysis.module_tag}.{export_name}"
            existing = entries.get(key)
            # Two files claiming the same tag: keep the lexicographically first path
            if existing is not None and existing.path <= analysis.path:
                continue
            entries[key] = IndexEntry(analysis.path, export_name, analysis.module_tag)

    by_name: dict[str, FileAnalysis] = {}
    for analysis in analyses:
        by_name.setdefault(analysis.file_name, analysis)
    filled = 0
    for namespace, file_name in tables.namespaces.items():
        analysis = by_name.get(file_name)
        if analysis is None:
            continue
        for export_name in analysis.exports:
            key = f"{namespace}.{export_name}"
            if key not in entries:
                entries[key] = IndexEntry(analysis.path, export_name, analysis.module_tag)
                filled += 1

    log.debug("type_index_built", entries=len(entries), registry_filled=filled)
    return TypeIndex(entries)
