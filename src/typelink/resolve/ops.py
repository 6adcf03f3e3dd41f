"""Resolution pass driver.

Discovers generated files, analyzes them all, builds the type index once,
then rewrites each file through a fixed chain of content -> content stages:

    structural fixes -> synthetic declarations -> placeholders -> imports

and persists files that changed. A file-system failure aborts the pass;
everything else is recorded in the returned PassReport.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import structlog

from typelink.config.models import CorpusConfig, TypelinkConfig
from typelink.core.errors import CorpusError
from typelink.core.logging import set_run_id
from typelink.resolve.analyzer import analyze_file, read_text
from typelink.resolve.fixer import fix_structural_patterns
from typelink.resolve.imports import synthesize_imports
from typelink.resolve.index import TypeIndex, build_type_index
from typelink.resolve.injector import inject_synthetic_declarations
from typelink.resolve.models import FileAnalysis, FileReport, PassReport, Tier
from typelink.resolve.resolver import resolve_placeholders
from typelink.resolve.tables import ResolverTables, build_tables

log = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SourceFile:
    path: Path
    tier: Tier


def _list_directory(directory: Path, tier: Tier, corpus: CorpusConfig) -> list[SourceFile]:
    excluded = tuple(corpus.excluded_suffixes)
    try:
        names = sorted(entry.name for entry in directory.iterdir() if entry.is_file())
    except OSError as e:
        raise CorpusError.read_failed(str(directory), str(e)) from e
    return [
        SourceFile(directory / name, tier)
        for name in names
        if name.endswith(corpus.file_suffix) and not name.endswith(excluded)
    ]


def discover_files(generated_dir: Path, corpus: CorpusConfig) -> list[SourceFile]:
    """Core-tier files of generated_dir followed by plugin-tier files.

    A missing plugins directory is an empty tier. A missing generated_dir
    is an error.
    """
    if not generated_dir.is_dir():
        raise CorpusError.dir_not_found(str(generated_dir))

    files = _list_directory(generated_dir, Tier.CORE, corpus)

    plugins_dir = generated_dir / corpus.plugins_subdir
    if plugins_dir.is_dir():
        files.extend(_list_directory(plugins_dir, Tier.PLUGIN, corpus))
    else:
        log.debug("plugins_dir_missing", path=str(plugins_dir))

    return files


def write_text(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise CorpusError.write_failed(str(path), str(e)) from e


def rewrite_content(
    content: str,
    analysis: FileAnalysis,
    index: TypeIndex,
    tables: ResolverTables,
    *,
    file_suffix: str,
) -> tuple[str, FileReport]:
    """Run the per-file stage chain. Pure: no file I/O."""
    report = FileReport(path=analysis.path)

    content, report.structural_fixes = fix_structural_patterns(content, tables.rules)
    content, report.injected = inject_synthetic_declarations(
        content, analysis.file_name, tables
    )
    content, resolution = resolve_placeholders(content, analysis, index, tables)
    content, report.imports_added = synthesize_imports(
        content,
        analysis.path,
        resolution.imports,
        banner=tables.banner,
        file_suffix=file_suffix,
    )

    report.resolved = resolution.resolved
    report.unresolved = resolution.unresolved
    return content, report


def run_pass(
    generated_dir: Path,
    config: TypelinkConfig | None = None,
    *,
    dry_run: bool = False,
    tables: ResolverTables | None = None,
) -> PassReport:
    """Resolve cross-package references across the whole corpus.

    Args:
        generated_dir: Primary (core tier) directory of generated files.
        config: Loaded configuration; defaults apply when omitted.
        dry_run: Compute and report everything, write nothing.
        tables: Pre-built tables, built from config when omitted.

    Raises:
        CorpusError: When a directory or file cannot be read or written.
    """
    config = config or TypelinkConfig()
    tables = tables or build_tables(config)
    corpus = config.corpus
    run_id = set_run_id()

    sources = discover_files(generated_dir, corpus)
    contents: dict[Path, str] = {}
    analyses: list[FileAnalysis] = []
    for source in sources:
        contents[source.path] = read_text(source.path)
        analyses.append(
            analyze_file(
                source.path,
                tier=source.tier,
                family_prefixes=tables.family_prefixes,
                content=contents[source.path],
            )
        )

    index = build_type_index(analyses, tables)
    report = PassReport(dry_run=dry_run, files_scanned=len(analyses), index_size=len(index))
    log.info("pass_started", run_id=run_id, files=len(analyses), index_size=len(index))

    for analysis in analyses:
        content, file_report = rewrite_content(
            contents[analysis.path],
            analysis,
            index,
            tables,
            file_suffix=corpus.file_suffix,
        )
        if file_report.changed and not dry_run:
            write_text(analysis.path, content)
            file_report.written = True
        report.files.append(file_report)

    log.info(
        "pass_finished",
        resolved=report.total_resolved,
        structural_fixes=report.total_structural_fixes,
        unresolved=len(report.unresolved),
        written=report.files_written,
        dry_run=dry_run,
    )
    return report
