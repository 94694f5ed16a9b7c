"""Attack-surface discovery, heuristics and risk scoring."""

from .checks import perform_security_checks
from .discovery import SurfaceDiscovery
from .endpoints import discover_endpoints
from .enrichment import ShodanEnricher
from .models import (
    DiscoveredEndpoint,
    DiscoveredSubdomain,
    DiscoveryResult,
    DomainDiscoveryReport,
    Evidence,
    HostDetails,
    ScanError,
    SeverityBreakdown,
    SurfaceReport,
    ToolUsage,
    Vulnerability,
    VulnerabilityType,
    normalize_domain,
)
from .scoring import calculate_risk_score, severity_breakdown, top_issues
from .service import SurfaceService
from .subdomains import discover_subdomains

__all__ = [
    "DiscoveredEndpoint",
    "DiscoveredSubdomain",
    "DiscoveryResult",
    "DomainDiscoveryReport",
    "Evidence",
    "HostDetails",
    "ScanError",
    "SeverityBreakdown",
    "ShodanEnricher",
    "SurfaceDiscovery",
    "SurfaceReport",
    "SurfaceService",
    "ToolUsage",
    "Vulnerability",
    "VulnerabilityType",
    "calculate_risk_score",
    "discover_endpoints",
    "discover_subdomains",
    "normalize_domain",
    "perform_security_checks",
    "severity_breakdown",
    "top_issues",
]
