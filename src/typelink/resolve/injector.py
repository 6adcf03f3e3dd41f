"""Synthetic Declaration Injector - hand-written types tygo never emits."""

from __future__ import annotations

import structlog

from typelink.resolve.tables import ResolverTables

log = structlog.get_logger(__name__)


def splice_after_banner(content: str, block: str, banner: str) -> str:
    """Insert block right after the generator banner line.

    Without a banner the block goes to the top of the file.
    """
    anchor = banner + "\n"
    position = content.find(anchor)
    if position == -1:
        log.warning("banner_missing", banner=banner)
        return block + content
    insert_at = position + len(anchor)
    return content[:insert_at] + block + content[insert_at:]


def inject_synthetic_declarations(
    content: str, file_name: str, tables: ResolverTables
) -> tuple[str, bool]:
    """Returns (content, injected). No-op for unlisted files or when already injected."""
    block = tables.synthetic.get(file_name)
    if block is None or tables.synthetic_marker in content:
        return content, False

    log.debug("synthetic_injected", file=file_name)
    return splice_after_banner(content, block, tables.banner), True
