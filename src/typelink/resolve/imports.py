"""Import Synthesizer - renders import needs as ``import type`` statements."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path, PurePosixPath

from typelink.resolve.injector import splice_after_banner
from typelink.resolve.models import ImportSpec


def module_specifier(consumer: Path, producer: Path, file_suffix: str) -> str:
    """Relative specifier from consumer to producer, without the file suffix.

    Plugin -> plugin and core -> core give ``./name``; plugin -> core
    gives ``../name``.
    """
    name = producer.name
    if name.endswith(file_suffix):
        name = name[: -len(file_suffix)]
    relative_dir = os.path.relpath(producer.parent, consumer.parent)
    parts = PurePosixPath(*Path(relative_dir).parts)
    specifier = (parts / name).as_posix()
    if not specifier.startswith("../"):
        specifier = f"./{specifier}"
    return specifier


def format_import(specs: Mapping[str, ImportSpec], specifier: str) -> str:
    ordered = sorted(specs.values(), key=lambda s: (s.export_name.casefold(), s.export_name))
    names = ", ".join(
        f"{spec.export_name} as {spec.alias}" if spec.alias else spec.export_name
        for spec in ordered
    )
    return f'import type {{ {names} }} from "{specifier}";'


def synthesize_imports(
    content: str,
    consumer: Path,
    imports: Mapping[Path, Mapping[str, ImportSpec]],
    *,
    banner: str,
    file_suffix: str,
) -> tuple[str, int]:
    """Splice one import statement per producer right after the banner.

    Runs after synthetic injection, so the imports land above any injected
    declarations. Returns (content, number of statements added).
    """
    statements = [
        format_import(specs, module_specifier(consumer, producer, file_suffix))
        for producer, specs in imports.items()
        if specs
    ]
    if not statements:
        return content, 0

    block = "\n" + "\n".join(statements) + "\n"
    return splice_after_banner(content, block, banner), len(statements)
