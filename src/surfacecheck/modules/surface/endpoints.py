"""Common API and admin path discovery on a single host."""

import logging

from surfacecheck.tools.http import HTTPClient, ProbeError, ProbeResult
from surfacecheck.utils.debug import debug_probe

from .models import DiscoveredEndpoint
from .pool import run_ordered
from .wordlists import CAPTURED_HEADERS, ENDPOINT_PATHS, ENDPOINT_PROTOCOLS

logger = logging.getLogger(__name__)


def is_reportable_status(status_code: int) -> bool:
    """An endpoint exists when it answered with anything but 404 or a 5xx."""
    return status_code < 500 and status_code != 404


def build_endpoint(subdomain: str, path: str, result: ProbeResult) -> DiscoveredEndpoint:
    """Convert a probe result into a discovered endpoint record."""
    return DiscoveredEndpoint(
        url=result.url,
        subdomain=subdomain,
        path=path,
        status_code=result.status_code,
        content_type=result.headers.get("content-type") or "unknown",
        headers={
            name: result.headers[name] for name in CAPTURED_HEADERS if result.headers.get(name)
        },
        response_time=result.headers.get("x-response-time"),
    )


async def discover_endpoints(
    client: HTTPClient,
    subdomain: str,
    paths: tuple[str, ...] = ENDPOINT_PATHS,
    concurrency: int = 1,
) -> list[DiscoveredEndpoint]:
    """Probe all paths over https, then all paths over http; keep the ones that exist."""

    async def check(target: tuple[str, str]) -> DiscoveredEndpoint | None:
        path, protocol = target
        outcome = await client.probe(f"{protocol}://{subdomain}{path}")
        if isinstance(outcome, ProbeError):
            debug_probe(outcome.url, f"error ({outcome.kind})")
            return None
        debug_probe(outcome.url, str(outcome.status_code), outcome.response_time)
        if not is_reportable_status(outcome.status_code):
            return None
        return build_endpoint(subdomain, path, outcome)

    targets = [(path, protocol) for protocol in ENDPOINT_PROTOCOLS for path in paths]
    results = await run_ordered(targets, check, concurrency)
    endpoints = [endpoint for endpoint in results if endpoint is not None]
    logger.info("Endpoint discovery for %s: %d endpoints", subdomain, len(endpoints))
    return endpoints
