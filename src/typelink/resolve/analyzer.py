"""File Analyzer - lexical scan of one generated declaration file."""

from __future__ import annotations

import re
from pathlib import Path

import structlog

from typelink.core.errors import CorpusError
from typelink.resolve.models import FileAnalysis, PlaceholderRef, Tier
from typelink.resolve.tables import module_tag

log = structlog.get_logger(__name__)

EXPORT_PATTERN = re.compile(r"^export (?:interface|type|const) (\w+)")
# tygo's marker for a type it could not see: `any /* some.pkg.Type */`
PLACEHOLDER_PATTERN = re.compile(r"any /\* ([\w.]+)\.(\w+) \*/")


def read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusError.read_failed(str(path), str(e)) from e


def scan_content(content: str) -> tuple[list[str], list[PlaceholderRef]]:
    """Return (exports, placeholders) found in content, in file order."""
    exports: list[str] = []
    placeholders: list[PlaceholderRef] = []

    for line_no, line in enumerate(content.split("\n"), 1):
        if match := EXPORT_PATTERN.match(line):
            exports.append(match.group(1))

        for match in PLACEHOLDER_PATTERN.finditer(line):
            placeholders.append(
                PlaceholderRef(
                    original=match.group(0),
                    namespace=match.group(1),
                    type_name=match.group(2),
                    line=line_no,
                )
            )

    return exports, placeholders


def analyze_file(
    path: Path,
    *,
    tier: Tier,
    family_prefixes: tuple[str, ...],
    content: str | None = None,
) -> FileAnalysis:
    """Analyze one file. Reads it unless content is supplied."""
    if content is None:
        content = read_text(path)

    exports, placeholders = scan_content(content)
    # Ordered set: the first declaration of a name wins
    unique_exports = tuple(dict.fromkeys(exports))

    log.debug(
        "file_analyzed",
        file=path.name,
        exports=len(unique_exports),
        placeholders=len(placeholders),
    )
    return FileAnalysis(
        path=path,
        module_tag=module_tag(path.name, family_prefixes),
        tier=tier,
        exports=unique_exports,
        placeholders=tuple(placeholders),
    )
