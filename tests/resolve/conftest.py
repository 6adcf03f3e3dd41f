"""Fixtures for resolution pipeline tests: a small tygo-style corpus on disk."""

from __future__ import annotations

from pathlib import Path

import pytest

from typelink.config.constants import DEFAULT_BANNER
from typelink.resolve.tables import ResolverTables, build_tables

BANNER = DEFAULT_BANNER


def generated(*lines: str) -> str:
    """File content starting with the generator banner."""
    return "\n".join([BANNER, *lines]) + "\n"


CADDY_CORE = generated(
    "",
    "//////////",
    "// source: caddy.go",
    "",
    "export interface App {",
    "  name?: string;",
    "}",
    "export type Duration = number;",
)

CADDY_HTTP = generated(
    "",
    "//////////",
    "// source: routes.go",
    "",
    "export interface Route {",
    "  group?: string;",
    "  handle?: any /* caddy.App */[];",
    "  timeout?: any /* caddy.Duration */;",
    "  remote?: any /* net.IP */;",
    "  parent?: any /* caddyhttp.Route */;",
    "  thing?: any /* unknownpkg.Thing */;",
    "}",
)

CADDY_TLS = generated(
    "",
    "export interface Automation {",
    "  err: error;",
    "  serial: bigInt;",
    "}",
    "export const CtxKey = any;",
)

CADDY_REWRITE = generated(
    "",
    "export interface Rewrite {",
    "  substr?: substrReplacer[];",
    "  regexp?: (regexReplacer | undefined)[];",
    "  query?: queryOps;",
    "  route?: any /* caddyhttp.Route */;",
    "}",
)

CADDY_HEADERS = generated(
    "",
    "export interface Handler {",
    "  request?: Record<string, string[]>;",
    "}",
)

AUTHCRUNCH_OAUTH = generated(
    "",
    "export interface Config {",
    "  client_id?: string;",
    "}",
)

AUTHCRUNCH_IDP = generated(
    "",
    "export interface Config {",
    "  oauth?: any /* oauth.Config */;",
    "  fallback?: any /* github.com.greenpau.pkg.oauth.Config */;",
    "  app?: any /* caddy.App */;",
    "}",
)

CORE_FILES = {
    "caddy-core.ts": CADDY_CORE,
    "caddy-http.ts": CADDY_HTTP,
    "caddy-tls.ts": CADDY_TLS,
    "caddy-rewrite.ts": CADDY_REWRITE,
    "caddy-headers.ts": CADDY_HEADERS,
    # schema companion, never touched
    "caddy-http.zod.ts": "export const routeSchema = any /* caddy.App */;\n",
}

PLUGIN_FILES = {
    "authcrunch-oauth.ts": AUTHCRUNCH_OAUTH,
    "authcrunch-idp.ts": AUTHCRUNCH_IDP,
}


def write_corpus(
    generated_dir: Path,
    core: dict[str, str],
    plugins: dict[str, str] | None = None,
) -> Path:
    generated_dir.mkdir(parents=True, exist_ok=True)
    for name, content in core.items():
        (generated_dir / name).write_text(content)
    if plugins is not None:
        plugins_dir = generated_dir / "plugins"
        plugins_dir.mkdir(exist_ok=True)
        for name, content in plugins.items():
            (plugins_dir / name).write_text(content)
    return generated_dir


def snapshot(generated_dir: Path) -> dict[str, str]:
    """Relative path -> content for every file under generated_dir."""
    return {
        str(path.relative_to(generated_dir)): path.read_text()
        for path in sorted(generated_dir.rglob("*"))
        if path.is_file()
    }


@pytest.fixture
def tables() -> ResolverTables:
    return build_tables()


@pytest.fixture
def corpus(tmp_path: Path) -> Path:
    """Full two-tier corpus. Returns the primary generated directory."""
    return write_corpus(tmp_path / "src" / "generated", CORE_FILES, PLUGIN_FILES)
