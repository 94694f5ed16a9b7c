"""Discovery stage: subdomains, endpoints and optional enrichment."""

import logging
import time

from surfacecheck.config.settings import SurfaceSettings
from surfacecheck.tools.http import HTTPClient

from .endpoints import discover_endpoints
from .enrichment import ShodanEnricher
from .models import DiscoveredEndpoint, DiscoveryResult, ScanError, normalize_domain
from .subdomains import discover_subdomains
from .wordlists import ENDPOINT_PATHS, SUBDOMAIN_PREFIXES

logger = logging.getLogger(__name__)


class SurfaceDiscovery:
    """Enumerate the reachable attack surface of a domain.

    Holds configuration only; every call is independent.
    """

    def __init__(
        self,
        settings: SurfaceSettings | None = None,
        enricher: ShodanEnricher | None = None,
        prefixes: tuple[str, ...] = SUBDOMAIN_PREFIXES,
        paths: tuple[str, ...] = ENDPOINT_PATHS,
    ):
        self.settings = settings or SurfaceSettings()
        self.enricher = enricher or ShodanEnricher(
            self.settings.shodan_api_key,
            delay=self.settings.shodan_delay,
            timeout=self.settings.shodan_timeout,
        )
        self.prefixes = prefixes
        self.paths = paths

    async def discover(self, domain: str) -> DiscoveryResult:
        """Run subdomain discovery, endpoint discovery and enrichment."""
        domain = normalize_domain(domain)
        result = DiscoveryResult(domain=domain)
        settings = self.settings
        start = time.monotonic()

        logger.info("Starting subdomain discovery for %s", domain)
        async with HTTPClient(
            timeout=settings.subdomain_timeout,
            max_redirects=settings.subdomain_max_redirects,
            user_agent=settings.user_agent,
        ) as client:
            result.subdomains = await discover_subdomains(
                client, domain, self.prefixes, settings.concurrency
            )

        logger.info("Discovering endpoints for %d subdomains", len(result.subdomains))
        async with HTTPClient(
            timeout=settings.endpoint_timeout,
            max_redirects=settings.endpoint_max_redirects,
            user_agent=settings.user_agent,
        ) as client:
            for record in result.subdomains:
                result.endpoints.extend(
                    await self._endpoints_for(client, record.subdomain, result.errors)
                )

        if self.enricher.enabled:
            logger.info("Checking exposure with Shodan")
            shodan = result.tools["shodan"]
            shodan.used = True
            shodan.queries_used = await self.enricher.enrich(result.subdomains)
            shodan.results = sum(1 for record in result.subdomains if record.ip_address)

        basic = result.tools["basic"]
        basic.duration_ms = int((time.monotonic() - start) * 1000)
        basic.results = len(result.subdomains)

        logger.info(
            "Discovery completed: %d subdomains, %d endpoints",
            len(result.subdomains),
            len(result.endpoints),
        )
        return result

    async def _endpoints_for(
        self,
        client: HTTPClient,
        subdomain: str,
        errors: list[ScanError],
    ) -> list[DiscoveredEndpoint]:
        try:
            return await discover_endpoints(
                client, subdomain, self.paths, self.settings.concurrency
            )
        except Exception as exc:
            logger.warning("Endpoint discovery failed for %s: %s", subdomain, exc)
            errors.append(
                ScanError(
                    message=f"Endpoint discovery failed for {subdomain}: {exc}",
                    tool="endpoint-discovery",
                )
            )
            return []
