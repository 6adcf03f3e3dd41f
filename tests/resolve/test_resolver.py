"""Tests for the Reference Resolver.

Covers:
- Strategy chain order (builtin exact/short, index exact/short, suffix)
- Same-file vs cross-file substitution
- Alias minting and import need bookkeeping
- Unresolved placeholders are preserved and recorded
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from tests.resolve.conftest import generated
from typelink.resolve.analyzer import analyze_file
from typelink.resolve.index import TypeIndex
from typelink.resolve.models import (
    FileAnalysis,
    ImportSpec,
    IndexEntry,
    Outcome,
    ResolutionReport,
    Tier,
)
from typelink.resolve.resolver import (
    alias_prefix,
    lookup_builtin,
    mint_alias,
    resolve_placeholders,
)
from typelink.resolve.tables import ResolverTables

GEN = Path("/corpus/generated")
PLUGINS = GEN / "plugins"
OAUTH = PLUGINS / "authcrunch-oauth.ts"
CORE = GEN / "caddy-core.ts"


def run(
    content: str,
    path: Path,
    entries: dict[str, IndexEntry],
    tables: ResolverTables,
) -> tuple[str, ResolutionReport]:
    analysis = analyze_file(
        path,
        tier=Tier.PLUGIN if path.parent == PLUGINS else Tier.CORE,
        family_prefixes=tables.family_prefixes,
        content=content,
    )
    return resolve_placeholders(content, analysis, TypeIndex(entries), tables)


class TestBuiltinSubstitution:
    """Placeholders for platform types become inline expressions."""

    def test_net_ip_becomes_string_without_imports(self, tables: ResolverTables) -> None:
        content = generated("export interface A {", "  ip?: any /* net.IP */;", "}")

        result, report = run(content, GEN / "caddy-x.ts", {}, tables)

        assert "  ip?: string;" in result
        assert report.imports == {}
        assert report.outcomes[0][1] is Outcome.BUILTIN
        assert report.resolved == 1

    def test_short_namespace_matches_builtin(self, tables: ResolverTables) -> None:
        content = "  t?: any /* go.std.time.Duration */;\n"

        result, _ = run(content, GEN / "caddy-x.ts", {}, tables)

        assert result == "  t?: number | string;\n"

    def test_builtin_wins_over_index(self, tables: ResolverTables) -> None:
        entries = {"net.IP": IndexEntry(GEN / "caddy-net.ts", "IP", "net")}

        result, report = run("any /* net.IP */\n", GEN / "caddy-x.ts", entries, tables)

        assert result == "string\n"
        assert report.imports == {}

    def test_config_extension_is_consulted(self, tables: ResolverTables) -> None:
        extended = replace(tables, builtins={**tables.builtins, "big.Float": "string"})
        assert lookup_builtin(
            analyze_file(
                GEN / "x.ts", tier=Tier.CORE, family_prefixes=(), content="any /* big.Float */"
            ).placeholders[0],
            extended.builtins,
        ) == "string"


class TestIndexResolution:
    """Placeholders found in the type index."""

    def test_same_file_hit_substitutes_export_name(self, tables: ResolverTables) -> None:
        path = GEN / "caddy-http.ts"
        entries = {"caddyhttp.Route": IndexEntry(path, "Route", "http")}
        content = generated("export interface Route {", "  parent?: any /* caddyhttp.Route */;", "}")

        result, report = run(content, path, entries, tables)

        assert "  parent?: Route;" in result
        assert report.imports == {}
        assert report.outcomes[0][1] is Outcome.SAME_FILE

    def test_cross_file_hit_records_import(self, tables: ResolverTables) -> None:
        entries = {"caddy.App": IndexEntry(CORE, "App", "core")}
        content = "  app?: any /* caddy.App */;\n"

        result, report = run(content, GEN / "caddy-http.ts", entries, tables)

        assert result == "  app?: App;\n"
        assert report.imports == {CORE: {"App": ImportSpec("App")}}
        assert report.outcomes[0][1] is Outcome.CROSS_FILE

    def test_exact_key_preferred_over_short_key(self, tables: ResolverTables) -> None:
        entries = {
            "pkg.oauth.Config": IndexEntry(OAUTH, "Config", "oauth"),
            "oauth.Config": IndexEntry(CORE, "Config", "core"),
        }

        _, report = run("any /* pkg.oauth.Config */\n", GEN / "caddy-x.ts", entries, tables)

        assert list(report.imports) == [OAUTH]

    def test_suffix_fallback(self, tables: ResolverTables) -> None:
        entries = {
            "caddyhttp.Handler": IndexEntry(GEN / "caddy-http.ts", "Handler", "http"),
            "caddyauth.Handler": IndexEntry(GEN / "caddy-auth.ts", "Handler", "auth"),
        }

        _, report = run("any /* caddy.Handler */\n", GEN / "caddy-x.ts", entries, tables)

        assert list(report.imports) == [GEN / "caddy-auth.ts"]


class TestAliasing:
    """Collision-safe local names for imported symbols."""

    def test_alias_prefix_uses_last_tag_segment(self) -> None:
        assert alias_prefix("oauth") == "Oauth"
        assert alias_prefix("security-portal") == "Portal"
        assert alias_prefix("tls") == "Tls"

    def test_mint_alias_skips_reserved_names(self) -> None:
        entry = IndexEntry(OAUTH, "Config", "oauth")
        assert mint_alias(entry, {"Config"}) == "OauthConfig"
        assert mint_alias(entry, {"Config", "OauthConfig"}) == "OauthConfig2"
        assert mint_alias(entry, {"Config", "OauthConfig", "OauthConfig2"}) == "OauthConfig3"

    def test_collision_with_own_export_mints_alias(self, tables: ResolverTables) -> None:
        entries = {"oauth.Config": IndexEntry(OAUTH, "Config", "oauth")}
        content = generated("export interface Config {", "  oauth?: any /* oauth.Config */;", "}")

        result, report = run(content, PLUGINS / "authcrunch-idp.ts", entries, tables)

        assert "  oauth?: OauthConfig;" in result
        assert report.imports == {OAUTH: {"Config": ImportSpec("Config", "OauthConfig")}}

    def test_repeated_reference_shares_one_decision(self, tables: ResolverTables) -> None:
        entries = {"oauth.Config": IndexEntry(OAUTH, "Config", "oauth")}
        content = generated(
            "export interface Config {",
            "  a?: any /* oauth.Config */;",
            "  b?: any /* github.com.greenpau.pkg.oauth.Config */;",
            "  c?: any /* oauth.Config */;",
            "}",
        )

        result, report = run(content, PLUGINS / "authcrunch-idp.ts", entries, tables)

        assert result.count("OauthConfig") == 3
        assert "any /*" not in result
        assert report.imports == {OAUTH: {"Config": ImportSpec("Config", "OauthConfig")}}
        assert report.resolved == 3

    def test_second_producer_of_same_name_is_aliased(self, tables: ResolverTables) -> None:
        entries = {
            "caddy.Config": IndexEntry(CORE, "Config", "core"),
            "oauth.Config": IndexEntry(OAUTH, "Config", "oauth"),
        }
        content = "a?: any /* caddy.Config */;\nb?: any /* oauth.Config */;\n"

        result, report = run(content, GEN / "caddy-x.ts", entries, tables)

        assert result == "a?: Config;\nb?: OauthConfig;\n"
        assert report.imports[CORE] == {"Config": ImportSpec("Config")}
        assert report.imports[OAUTH] == {"Config": ImportSpec("Config", "OauthConfig")}

    def test_injected_declaration_names_are_reserved(self, tables: ResolverTables) -> None:
        """Names the injector adds to caddy-rewrite.ts count as taken on the first pass."""
        http = GEN / "caddy-http.ts"
        entries = {"caddyhttp.queryOps": IndexEntry(http, "queryOps", "http")}
        content = generated("export interface Rewrite {", "  q?: any /* caddyhttp.queryOps */;", "}")

        result, report = run(content, GEN / "caddy-rewrite.ts", entries, tables)

        assert "  q?: HttpqueryOps;" in result
        assert report.imports == {http: {"queryOps": ImportSpec("queryOps", "HttpqueryOps")}}


class TestUnresolved:
    """Placeholders nothing matches."""

    def test_left_untouched_and_recorded(self, tables: ResolverTables) -> None:
        content = generated("export interface A {", "  x?: any /* unknownpkg.Thing */;", "}")

        result, report = run(content, GEN / "caddy-x.ts", {}, tables)

        assert result == content
        assert report.unresolved == ["unknownpkg.Thing (line 3)"]
        assert report.resolved == 0
        assert report.outcomes[0][1] is Outcome.UNRESOLVED

    def test_every_placeholder_gets_exactly_one_outcome(self, tables: ResolverTables) -> None:
        entries = {"caddy.App": IndexEntry(CORE, "App", "core")}
        content = (
            "a?: any /* caddy.App */;\n"
            "b?: any /* nope.Missing */;\n"
            "c?: any /* net.IP */;\n"
        )
        analysis: FileAnalysis = analyze_file(
            GEN / "caddy-x.ts", tier=Tier.CORE, family_prefixes=(), content=content
        )

        _, report = resolve_placeholders(content, analysis, TypeIndex(entries), tables)

        assert [outcome for _, outcome in report.outcomes] == [
            Outcome.CROSS_FILE,
            Outcome.UNRESOLVED,
            Outcome.BUILTIN,
        ]
