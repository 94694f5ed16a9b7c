"""Static wordlists used for subdomain and endpoint probing."""

SUBDOMAIN_PREFIXES: tuple[str, ...] = (
    "api",
    "www",
    "app",
    "admin",
    "test",
    "dev",
    "staging",
    "prod",
    "api-v1",
    "api-v2",
    "v1",
    "v2",
    "rest",
    "graphql",
    "gateway",
    "mobile",
    "web",
    "backend",
    "internal",
    "external",
    "public",
    "mail",
    "email",
    "smtp",
    "imap",
    "pop",
    "webmail",
    "mx",
)

ENDPOINT_PATHS: tuple[str, ...] = (
    "/api",
    "/api/v1",
    "/api/v2",
    "/api/v3",
    "/rest",
    "/rest/v1",
    "/rest/v2",
    "/graphql",
    "/graphql/v1",
    "/swagger",
    "/swagger-ui",
    "/api-docs",
    "/openapi.json",
    "/swagger.json",
    "/health",
    "/status",
    "/ping",
    "/users",
    "/user",
    "/auth",
    "/login",
    "/admin",
    "/dashboard",
    "/v1",
    "/v2",
    "/v3",
)

# Endpoint probes try TLS first for every path.
ENDPOINT_PROTOCOLS: tuple[str, ...] = ("https", "http")

# Response headers kept on discovered endpoints.
CAPTURED_HEADERS: tuple[str, ...] = ("server", "x-powered-by", "access-control-allow-origin")
