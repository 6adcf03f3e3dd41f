"""Static resolution tables for the tygo-generated Caddy corpus.

These are read-only module data. The pipeline never reads them directly;
``typelink.resolve.tables.build_tables`` folds them together with config
extensions into one frozen value that is passed explicitly.
"""

from types import MappingProxyType

DEFAULT_BANNER = "// Code generated by tygo. DO NOT EDIT."
DEFAULT_FILE_SUFFIX = ".ts"
DEFAULT_EXCLUDED_SUFFIXES = (".zod.ts",)
DEFAULT_FAMILY_PREFIXES = ("authcrunch-", "caddy-")

# Go platform and third-party types with no generated counterpart.
# Replaced inline, no import needed.
BUILTIN_SUBSTITUTIONS = MappingProxyType(
    {
        # net/http
        "http.Header": "Record<string, string[]>",
        "http.Request": "unknown",
        "http.ResponseWriter": "unknown",
        "http.FileSystem": "unknown",
        # net/url
        "url.Values": "Record<string, string[]>",
        "url.URL": "string",
        # crypto
        "tls.ConnectionState": "unknown",
        "x509.PublicKeyAlgorithm": "number",
        # io / fmt / text
        "io.WriteCloser": "unknown",
        "io.Reader": "unknown",
        "io.Writer": "unknown",
        "fmt.Stringer": "unknown",
        "template.FuncMap": "Record<string, unknown>",
        "xml.Name": "string",
        # net
        "netip.AddrPort": "string",
        "net.IP": "string",
        # external modules not present in the generated set
        "acme.EAB": "{ kid?: string; hmacEncoded?: string }",
        "libdns.RecordGetter": "unknown",
        "libdns.RecordSetter": "unknown",
        "zap.Logger": "unknown",
        # runtime internals
        "context.Context": "unknown",
        "sync.RWMutex": "unknown",
        "time.Time": "string",
        "time.Duration": "number | string",
        "regexp.Regexp": "string",
        "json.RawMessage": "unknown",
    }
)

# Go package name -> generated file exporting that package's types.
# Only fills gaps left by self-declared exports.
NAMESPACE_REGISTRY = MappingProxyType(
    {
        # authcrunch packages
        "ui": "authcrunch-ui.ts",
        "cookie": "authcrunch-cookie.ts",
        "icons": "authcrunch-icons.ts",
        "acl": "authcrunch-acl.ts",
        "kms": "authcrunch-kms.ts",
        "credentials": "authcrunch-credentials.ts",
        "authn": "authcrunch-authn.ts",
        "authz": "authcrunch-authz.ts",
        "ids": "authcrunch-ids.ts",
        "idp": "authcrunch-idp.ts",
        "sso": "authcrunch-sso.ts",
        "oauth": "authcrunch-oauth.ts",
        "saml": "authcrunch-saml.ts",
        "transformer": "authcrunch-transformer.ts",
        "options": "authcrunch-options.ts",
        "redirects": "authcrunch-redirects.ts",
        "bypass": "authcrunch-bypass.ts",
        "injector": "authcrunch-injector.ts",
        "authproxy": "authcrunch-authproxy.ts",
        "registry": "authcrunch-registry.ts",
        "messaging": "authcrunch-messaging.ts",
        "authcrunch": "authcrunch-core.ts",
        # core Caddy packages
        "caddy": "caddy-core.ts",
        "caddyhttp": "caddy-http.ts",
        "caddytls": "caddy-tls.ts",
        "reverseproxy": "caddy-reverseproxy.ts",
        "fileserver": "caddy-fileserver.ts",
        "encode": "caddy-encode.ts",
        "headers": "caddy-headers.ts",
        "rewrite": "caddy-rewrite.ts",
        "templates": "caddy-templates.ts",
    }
)

# Raw-identifier quirks tygo emits without a placeholder marker.
# (pattern, replacement) in application order. Replacements use re.sub syntax.
# Every replacement must be a fixed point of its own pattern.
STRUCTURAL_RULES: tuple[tuple[str, str], ...] = (
    # Go error interface
    (r":\s*error\s*;", ": Error;"),
    (r":\s*error\s*\|", ": Error |"),
    (r":\s*error\s*}", ": Error}"),
    # math/big
    (r":\s*bigInt\[\]\s*;", ": string[];"),
    (r":\s*bigInt\s*;", ": string;"),
    (r":\s*\*bigInt\s*;", ": string;"),
    # context key consts come out as `= any`
    (r"export const (\w+) = any;", r"export const \1: unknown = null;"),
    # unexported caddyhttp/rewrite types, backed by SYNTHETIC_DECLARATIONS
    (r":\s*substrReplacer\[\]\s*;", ": substrReplacer[];"),
    (r":\s*\(regexReplacer \| undefined\)\[\]\s*;", ": regexReplacer[];"),
    (r":\s*queryOps\s*;", ": queryOps;"),
)

SYNTHETIC_MARKER = "// Unexported Go types"

# Hand-written declarations for types tygo never emits, keyed by filename.
# Each block must contain SYNTHETIC_MARKER so repeat runs skip it.
SYNTHETIC_DECLARATIONS = MappingProxyType(
    {
        "caddy-rewrite.ts": f"""
{SYNTHETIC_MARKER} (approximated from Caddy source)
export interface substrReplacer {{
  find?: string;
  replace?: string;
  limit?: number;
}}

export interface regexReplacer {{
  find?: string;
  replace?: string;
}}

export interface queryOps {{
  delete?: string[];
  set?: Record<string, string>;
  add?: Record<string, string[]>;
  replace?: Record<string, string[]>;
  rename?: {{ key: string; val: string }}[];
}}
""",
    }
)
