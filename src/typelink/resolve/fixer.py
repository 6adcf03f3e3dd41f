"""Structural Pattern Fixer - rewrites generator quirks that carry no placeholder."""

from __future__ import annotations

import re

from typelink.resolve.tables import StructuralRule


def apply_rule(content: str, rule: StructuralRule) -> tuple[str, int]:
    """Apply one rule, counting only matches whose text actually changes."""
    changed = 0

    def _replace(match: re.Match[str]) -> str:
        nonlocal changed
        replacement = match.expand(rule.replacement)
        if replacement != match.group(0):
            changed += 1
        return replacement

    return rule.pattern.sub(_replace, content), changed


def fix_structural_patterns(
    content: str, rules: tuple[StructuralRule, ...]
) -> tuple[str, int]:
    """Apply every rule in order. Returns (content, number of changed matches)."""
    total = 0
    for rule in rules:
        content, changed = apply_rule(content, rule)
        total += changed
    return content, total
