"""Immutable bundle of the static tables one pass resolves against."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from typelink.config.constants import (
    BUILTIN_SUBSTITUTIONS,
    NAMESPACE_REGISTRY,
    STRUCTURAL_RULES,
    SYNTHETIC_DECLARATIONS,
    SYNTHETIC_MARKER,
)
from typelink.config.models import TypelinkConfig


@dataclass(frozen=True, slots=True)
class StructuralRule:
    pattern: re.Pattern[str]
    replacement: str


@dataclass(frozen=True, slots=True)
class ResolverTables:
    """Static configuration data, passed explicitly to every pipeline stage."""

    banner: str
    family_prefixes: tuple[str, ...]
    builtins: Mapping[str, str]
    namespaces: Mapping[str, str]
    rules: tuple[StructuralRule, ...]
    synthetic: Mapping[str, str]
    synthetic_marker: str = SYNTHETIC_MARKER


def build_tables(config: TypelinkConfig | None = None) -> ResolverTables:
    """Combine the built-in tables with any extensions from config."""
    config = config or TypelinkConfig()
    builtins = {**BUILTIN_SUBSTITUTIONS, **config.resolve.extra_builtins}
    namespaces = {**NAMESPACE_REGISTRY, **config.resolve.extra_namespaces}
    return ResolverTables(
        banner=config.corpus.banner,
        family_prefixes=tuple(config.corpus.family_prefixes),
        builtins=MappingProxyType(builtins),
        namespaces=MappingProxyType(namespaces),
        rules=tuple(
            StructuralRule(re.compile(pattern), replacement)
            for pattern, replacement in STRUCTURAL_RULES
        ),
        synthetic=SYNTHETIC_DECLARATIONS,
    )


def module_tag(file_name: str, family_prefixes: tuple[str, ...]) -> str:
    """Module tag of a generated file: its stem minus a known family prefix.

    ``authcrunch-oauth.ts`` -> ``oauth``; ``caddy-http.ts`` -> ``http``.
    Files outside every family keep their full stem.
    """
    stem = file_name.split(".", 1)[0]
    for prefix in family_prefixes:
        if stem.startswith(prefix):
            return stem[len(prefix) :]
    return stem
