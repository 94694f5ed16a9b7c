"""Optional Shodan enrichment of discovered subdomains."""

import asyncio
import json
import logging
from typing import Any

from surfacecheck.errors import EnrichmentUnavailable, NetworkUnreachable
from surfacecheck.tools.http import HTTPClient
from surfacecheck.utils.debug import debug_print

from .models import DiscoveredSubdomain, HostDetails

logger = logging.getLogger(__name__)

SHODAN_SEARCH_URL = "https://api.shodan.io/shodan/host/search"


class ShodanEnricher:
    """Copy IP, ports, tags and location from Shodan onto subdomain records."""

    def __init__(self, api_key: str | None, delay: float = 1.0, timeout: float = 10.0):
        self.api_key = api_key
        self.delay = delay
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    async def lookup(self, client: HTTPClient, hostname: str) -> dict[str, Any] | None:
        """Return the first Shodan match for a hostname, or ``None``.

        Raises :class:`EnrichmentUnavailable` when the lookup itself fails.
        """
        try:
            response = await client.get(
                SHODAN_SEARCH_URL,
                params={"key": self.api_key, "query": f"hostname:{hostname}"},
            )
        except NetworkUnreachable as exc:
            raise EnrichmentUnavailable(f"Shodan lookup failed for {hostname}: {exc}") from exc

        if response.status_code != 200:
            raise EnrichmentUnavailable(
                f"Shodan lookup failed for {hostname}: HTTP {response.status_code}"
            )
        try:
            data = json.loads(response.body)
        except json.JSONDecodeError as exc:
            raise EnrichmentUnavailable(f"Shodan returned invalid JSON for {hostname}") from exc

        if not isinstance(data, dict):
            return None
        matches = data.get("matches") or []
        return matches[0] if matches else None

    async def enrich(self, subdomains: list[DiscoveredSubdomain]) -> int:
        """Enrich subdomains in place and return the number of queries sent."""
        if not self.enabled or not subdomains:
            return 0

        queries = 0
        async with HTTPClient(timeout=self.timeout) as client:
            for index, record in enumerate(subdomains):
                if index:
                    await asyncio.sleep(self.delay)
                queries += 1
                try:
                    match = await self.lookup(client, record.subdomain)
                except EnrichmentUnavailable as exc:
                    logger.warning("%s", exc)
                    continue
                if match:
                    apply_match(record, match)
                    debug_print("enrich", f"{record.subdomain} -> {record.ip_address}")
        return queries


def apply_match(record: DiscoveredSubdomain, match: dict[str, Any]) -> None:
    """Copy the interesting fields of a Shodan match onto a subdomain."""
    location = match.get("location") or {}
    record.ip_address = match.get("ip_str")
    ports = match.get("ports")
    if not ports and match.get("port") is not None:
        ports = [match["port"]]
    record.ports = list(ports or [])
    record.tags = list(match.get("tags") or [])
    record.host_details = HostDetails(
        country=location.get("country_name"),
        city=location.get("city"),
        isp=match.get("isp"),
        org=match.get("org"),
        last_update=match.get("timestamp"),
    )
