"""Reference Resolver - turns placeholders into real type references.

Each placeholder goes through an ordered strategy chain and stops at the
first hit:

1. builtin table, exact ``namespace.Type``
2. builtin table, ``lastSegment.Type``
3. type index, the same two keys
4. type index, any key starting with ``lastSegment`` and ending in ``.Type``

Builtin hits and same-file hits are substituted in place. Cross-file hits
are substituted with a local name and recorded as an import need. Misses
leave the placeholder text untouched and are reported; resolution never
raises.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import structlog

from typelink.resolve.analyzer import scan_content
from typelink.resolve.index import TypeIndex
from typelink.resolve.models import (
    FileAnalysis,
    ImportSpec,
    IndexEntry,
    Outcome,
    PlaceholderRef,
    ResolutionReport,
)
from typelink.resolve.tables import ResolverTables

log = structlog.get_logger(__name__)


def lookup_builtin(ref: PlaceholderRef, builtins: Mapping[str, str]) -> str | None:
    for key in (ref.qualified_name, ref.short_qualified_name):
        expression = builtins.get(key)
        if expression:
            return expression
    return None


def lookup_index(ref: PlaceholderRef, index: TypeIndex) -> IndexEntry | None:
    entry = index.lookup(ref.qualified_name, ref.short_qualified_name)
    if entry is None:
        entry = index.find_by_suffix(ref.short_namespace, ref.type_name)
    return entry


def alias_prefix(module_tag: str) -> str:
    """``oauth`` -> ``Oauth``; ``security-portal`` -> ``Portal``."""
    segment = module_tag.rsplit("-", 1)[-1]
    return segment[:1].upper() + segment[1:]


def mint_alias(entry: IndexEntry, reserved: set[str]) -> str:
    """Deterministic collision-free local name for an imported symbol."""
    base = f"{alias_prefix(entry.module_tag)}{entry.export_name}"
    candidate = base
    counter = 1
    while candidate in reserved:
        counter += 1
        candidate = f"{base}{counter}"
    return candidate


class _ImportPlanner:
    """Tracks one file's import needs and the local names they occupy."""

    def __init__(
        self, own_exports: tuple[str, ...], imports: dict[Path, dict[str, ImportSpec]]
    ) -> None:
        self._reserved = set(own_exports)
        self._imports = imports

    def local_name_for(self, entry: IndexEntry) -> str:
        specs = self._imports.setdefault(entry.path, {})
        spec = specs.get(entry.export_name)
        if spec is None:
            alias = None
            if entry.export_name in self._reserved:
                alias = mint_alias(entry, self._reserved)
            spec = ImportSpec(entry.export_name, alias)
            specs[entry.export_name] = spec
            self._reserved.add(spec.local_name)
        return spec.local_name


def resolve_placeholders(
    content: str,
    analysis: FileAnalysis,
    index: TypeIndex,
    tables: ResolverTables,
) -> tuple[str, ResolutionReport]:
    """Resolve every placeholder of analysis against content.

    Placeholders are handled in file order; each substitution replaces the
    first remaining occurrence of the placeholder text.
    """
    report = ResolutionReport()
    # Names the injector declares in this file are taken too
    synthetic_exports, _ = scan_content(tables.synthetic.get(analysis.file_name, ""))
    planner = _ImportPlanner((*analysis.exports, *synthetic_exports), report.imports)

    for ref in analysis.placeholders:
        replacement: str | None = None
        outcome = Outcome.UNRESOLVED

        if (expression := lookup_builtin(ref, tables.builtins)) is not None:
            replacement, outcome = expression, Outcome.BUILTIN
        elif (entry := lookup_index(ref, index)) is not None:
            if entry.path == analysis.path:
                replacement, outcome = entry.export_name, Outcome.SAME_FILE
            else:
                replacement, outcome = planner.local_name_for(entry), Outcome.CROSS_FILE

        report.outcomes.append((ref, outcome))
        if replacement is None:
            report.unresolved.append(ref.describe())
            log.warning("placeholder_unresolved", file=analysis.file_name, ref=ref.describe())
            continue

        content = content.replace(ref.original, replacement, 1)
        log.debug(
            "placeholder_resolved",
            file=analysis.file_name,
            ref=ref.qualified_name,
            outcome=outcome.value,
            replacement=replacement,
        )

    return content, report
