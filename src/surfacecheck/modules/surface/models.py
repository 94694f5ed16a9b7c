"""Data models for attack-surface discovery, findings and reports."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum


def _utc_now() -> datetime:
    return datetime.now(UTC)


def normalize_domain(domain: str) -> str:
    """Strip protocol and trailing slash from a user-supplied domain."""
    value = domain.strip().lower()
    for prefix in ("https://", "http://"):
        if value.startswith(prefix):
            value = value[len(prefix) :]
            break
    if value.endswith("/"):
        value = value[:-1]
    return value


@dataclass
class HostDetails:
    """Internet-scan metadata copied from the host-search service."""

    country: str | None = None
    city: str | None = None
    isp: str | None = None
    org: str | None = None
    last_update: str | None = None


@dataclass
class DiscoveredSubdomain:
    """A reachable subdomain found by wordlist probing."""

    subdomain: str
    protocol: str
    status_code: int
    first_seen: datetime = field(default_factory=_utc_now)
    is_active: bool = True
    ip_address: str | None = None
    ports: list[int] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    host_details: HostDetails | None = None


@dataclass
class DiscoveredEndpoint:
    """A path on a subdomain that answered with a non-404, non-5xx status."""

    url: str
    subdomain: str
    path: str
    status_code: int
    method: str = "GET"
    content_type: str = "unknown"
    headers: dict[str, str] = field(default_factory=dict)
    response_time: str | None = None
    last_checked: datetime = field(default_factory=_utc_now)
    is_public: bool = field(init=False)
    requires_auth: bool = field(init=False)

    def __post_init__(self) -> None:
        self.is_public = self.status_code < 400
        self.requires_auth = self.status_code in (401, 403)


class VulnerabilityType(str, Enum):
    """Kinds of heuristic findings."""

    INSECURE_PROTOCOL = "insecure_protocol"
    NO_AUTHENTICATION = "no_authentication"
    CORS_MISCONFIGURATION = "cors_misconfiguration"
    INFORMATION_DISCLOSURE = "information_disclosure"
    EXPOSED_SENSITIVE_DATA = "exposed_sensitive_data"


@dataclass
class Evidence:
    location: str
    response: str | None = None


@dataclass
class Vulnerability:
    """Represents a heuristic finding on one endpoint."""

    type: VulnerabilityType
    severity: str
    title: str
    description: str
    recommendation: str
    evidence: Evidence


@dataclass
class SeverityBreakdown:
    high: int = 0
    medium: int = 0
    low: int = 0
    total: int = field(init=False)

    def __post_init__(self) -> None:
        self.total = self.high + self.medium + self.low


@dataclass
class ScanError:
    """A non-fatal failure recorded during discovery."""

    message: str
    tool: str


@dataclass
class ToolUsage:
    """Bookkeeping for one discovery source."""

    used: bool = False
    duration_ms: int = 0
    results: int = 0
    queries_used: int = 0


@dataclass
class DiscoveryResult:
    """Raw output of the discovery stage for one domain."""

    domain: str
    subdomains: list[DiscoveredSubdomain] = field(default_factory=list)
    endpoints: list[DiscoveredEndpoint] = field(default_factory=list)
    tools: dict[str, ToolUsage] = field(
        default_factory=lambda: {"basic": ToolUsage(used=True), "shodan": ToolUsage()}
    )
    errors: list[ScanError] = field(default_factory=list)


@dataclass
class SurfaceReport:
    """Summary returned by a quick scan."""

    domain: str
    subdomains: int
    endpoints: int
    vulnerabilities: int
    risk_score: int
    severity_breakdown: SeverityBreakdown
    top_issues: list[Vulnerability]
    errors: list[ScanError] = field(default_factory=list)
    timestamp: datetime = field(default_factory=_utc_now)


@dataclass
class DomainDiscoveryReport:
    """Full discovery output with findings for one domain."""

    domain: str
    discovery: DiscoveryResult
    vulnerabilities: list[Vulnerability]
    summary: SeverityBreakdown
    timestamp: datetime = field(default_factory=_utc_now)
