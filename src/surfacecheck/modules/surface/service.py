"""Caller-facing surface scan operations."""

import logging

from surfacecheck.config.settings import SurfaceSettings

from .checks import perform_security_checks
from .discovery import SurfaceDiscovery
from .models import DomainDiscoveryReport, SurfaceReport
from .scoring import calculate_risk_score, severity_breakdown, top_issues

logger = logging.getLogger(__name__)


class SurfaceService:
    """Discovery → heuristics → scoring pipeline for one domain."""

    def __init__(
        self,
        settings: SurfaceSettings | None = None,
        discovery: SurfaceDiscovery | None = None,
    ):
        self.settings = settings or SurfaceSettings()
        self.discovery = discovery or SurfaceDiscovery(self.settings)

    async def quick_scan(self, domain: str) -> SurfaceReport:
        """Scan a domain and summarize it as a risk score."""
        results = await self.discovery.discover(domain)
        vulnerabilities = perform_security_checks(results.endpoints)
        risk_score = calculate_risk_score(vulnerabilities)
        logger.info(
            "Quick scan of %s: %d findings, risk %d/10",
            results.domain,
            len(vulnerabilities),
            risk_score,
        )
        return SurfaceReport(
            domain=results.domain,
            subdomains=len(results.subdomains),
            endpoints=len(results.endpoints),
            vulnerabilities=len(vulnerabilities),
            risk_score=risk_score,
            severity_breakdown=severity_breakdown(vulnerabilities),
            top_issues=top_issues(vulnerabilities),
            errors=list(results.errors),
        )

    async def discover(self, domain: str) -> DomainDiscoveryReport:
        """Return the full discovery output together with every finding."""
        results = await self.discovery.discover(domain)
        vulnerabilities = perform_security_checks(results.endpoints)
        return DomainDiscoveryReport(
            domain=results.domain,
            discovery=results,
            vulnerabilities=vulnerabilities,
            summary=severity_breakdown(vulnerabilities),
        )
