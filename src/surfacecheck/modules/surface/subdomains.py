"""Wordlist-based subdomain discovery."""

import logging

from surfacecheck.tools.http import HTTPClient, ProbeError
from surfacecheck.utils.debug import debug_probe

from .models import DiscoveredSubdomain
from .pool import run_ordered
from .wordlists import SUBDOMAIN_PREFIXES

logger = logging.getLogger(__name__)


async def probe_subdomain(client: HTTPClient, subdomain: str) -> DiscoveredSubdomain | None:
    """Probe one hostname over HTTP, falling back to HTTPS on a transport failure.

    Returns ``None`` when neither protocol answers or the answer is a 5xx.
    """
    for protocol in ("http", "https"):
        outcome = await client.probe(f"{protocol}://{subdomain}")
        if isinstance(outcome, ProbeError):
            debug_probe(outcome.url, f"error ({outcome.kind})")
            continue

        debug_probe(outcome.url, str(outcome.status_code), outcome.response_time)
        if outcome.status_code >= 500:
            return None
        return DiscoveredSubdomain(
            subdomain=subdomain.lower(),
            protocol=protocol,
            status_code=outcome.status_code,
        )
    return None


async def discover_subdomains(
    client: HTTPClient,
    domain: str,
    prefixes: tuple[str, ...] = SUBDOMAIN_PREFIXES,
    concurrency: int = 1,
) -> list[DiscoveredSubdomain]:
    """Enumerate reachable ``prefix.domain`` hosts in wordlist order."""
    candidates = [f"{prefix}.{domain}" for prefix in prefixes]
    results = await run_ordered(
        candidates, lambda host: probe_subdomain(client, host), concurrency
    )
    found = [result for result in results if result is not None]
    logger.info("Subdomain discovery for %s: %d/%d reachable", domain, len(found), len(candidates))
    return found
