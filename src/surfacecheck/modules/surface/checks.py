"""Per-endpoint heuristic security checks."""

from collections.abc import Iterable

from .models import DiscoveredEndpoint, Evidence, Vulnerability, VulnerabilityType

DISCLOSURE_HEADERS = ("server", "x-powered-by")
ADMIN_MARKERS = ("admin", "dashboard")


def check_insecure_protocol(endpoint: DiscoveredEndpoint) -> list[Vulnerability]:
    if not endpoint.url.startswith("http://"):
        return []
    return [
        Vulnerability(
            type=VulnerabilityType.INSECURE_PROTOCOL,
            severity="high",
            title="Insecure Protocol (HTTP)",
            description=f"The endpoint {endpoint.url} is using HTTP instead of HTTPS.",
            recommendation="Implement HTTPS/TLS encryption for all API endpoints.",
            evidence=Evidence(location=endpoint.url),
        )
    ]


def check_authentication(endpoint: DiscoveredEndpoint) -> list[Vulnerability]:
    if not (endpoint.is_public and endpoint.status_code == 200):
        return []
    return [
        Vulnerability(
            type=VulnerabilityType.NO_AUTHENTICATION,
            severity="medium",
            title="No Authentication Required",
            description=(
                f"The endpoint {endpoint.url} is publicly accessible without authentication."
            ),
            recommendation="Implement proper authentication mechanisms.",
            evidence=Evidence(location=endpoint.url, response=f"HTTP {endpoint.status_code}"),
        )
    ]


def check_cors(endpoint: DiscoveredEndpoint) -> list[Vulnerability]:
    if endpoint.headers.get("access-control-allow-origin") != "*":
        return []
    return [
        Vulnerability(
            type=VulnerabilityType.CORS_MISCONFIGURATION,
            severity="medium",
            title="CORS Wildcard Configuration",
            description=f"The endpoint {endpoint.url} allows CORS requests from any origin.",
            recommendation="Configure CORS to allow only specific trusted origins.",
            evidence=Evidence(location=endpoint.url, response="Access-Control-Allow-Origin: *"),
        )
    ]


def check_information_disclosure(endpoint: DiscoveredEndpoint) -> list[Vulnerability]:
    """One finding per disclosing header."""
    findings: list[Vulnerability] = []
    for header in DISCLOSURE_HEADERS:
        value = endpoint.headers.get(header)
        if not value:
            continue
        findings.append(
            Vulnerability(
                type=VulnerabilityType.INFORMATION_DISCLOSURE,
                severity="low",
                title="Information Disclosure in Headers",
                description=(
                    f"The endpoint {endpoint.url} reveals server information in HTTP headers."
                ),
                recommendation=(
                    "Remove or obfuscate server information from HTTP response headers."
                ),
                evidence=Evidence(location=endpoint.url, response=f"{header}: {value}"),
            )
        )
    return findings


def check_admin_interface(endpoint: DiscoveredEndpoint) -> list[Vulnerability]:
    if not any(marker in endpoint.path for marker in ADMIN_MARKERS):
        return []
    if endpoint.status_code >= 400:
        return []
    return [
        Vulnerability(
            type=VulnerabilityType.EXPOSED_SENSITIVE_DATA,
            severity="high",
            title="Exposed Administrative Interface",
            description=f"The endpoint {endpoint.url} appears to be an administrative interface.",
            recommendation="Restrict access to administrative interfaces.",
            evidence=Evidence(location=endpoint.url),
        )
    ]


ENDPOINT_CHECKS = (
    check_insecure_protocol,
    check_authentication,
    check_cors,
    check_information_disclosure,
    check_admin_interface,
)


def perform_security_checks(endpoints: Iterable[DiscoveredEndpoint]) -> list[Vulnerability]:
    """Classify endpoints into findings, grouped by endpoint in input order."""
    vulnerabilities: list[Vulnerability] = []
    for endpoint in endpoints:
        for check in ENDPOINT_CHECKS:
            vulnerabilities.extend(check(endpoint))
    return vulnerabilities
