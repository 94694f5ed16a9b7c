"""Have I Been Pwned API client."""

import logging
from urllib.parse import quote

import httpx

from surfacecheck.config.settings import BreachSettings
from surfacecheck.errors import BreachServiceRateLimited, BreachServiceUnavailable

from .models import BreachRecord

logger = logging.getLogger(__name__)

DEFAULT_RETRY_AFTER = 3.0


def _retry_after(response: httpx.Response) -> float:
    try:
        return max(DEFAULT_RETRY_AFTER, float(response.headers.get("retry-after", "")))
    except ValueError:
        return DEFAULT_RETRY_AFTER


class HIBPClient:
    """Async client for the breach database.

    Use as an async context manager; one instance serves one breach check.
    """

    def __init__(self, settings: BreachSettings | None = None):
        self.settings = settings or BreachSettings()
        self.client: httpx.AsyncClient | None = None

    async def __aenter__(self):
        if not self.settings.api_key:
            raise BreachServiceUnavailable("HIBP API key not configured")
        self.client = httpx.AsyncClient(
            base_url=self.settings.base_url,
            timeout=self.settings.timeout,
            headers={
                "hibp-api-key": self.settings.api_key,
                "user-agent": self.settings.user_agent,
            },
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.client:
            await self.client.aclose()

    async def _get(self, path: str) -> httpx.Response:
        if not self.client:
            raise RuntimeError("Client not initialized. Use async context manager.")
        try:
            return await self.client.get(path)
        except httpx.HTTPError as exc:
            raise BreachServiceUnavailable(f"HIBP request failed: {exc}") from exc

    async def get_breached_account(self, email: str) -> list[str]:
        """Return the names of every breach that contains ``email``.

        A 404 means the address is in no breach.
        """
        response = await self._get(f"/breachedaccount/{quote(email, safe='')}")

        if response.status_code == 404:
            logger.info("No breaches found for %s", email)
            return []
        if response.status_code == 429:
            retry_after = _retry_after(response)
            logger.warning("HIBP rate limit exceeded, retry after %.1fs", retry_after)
            raise BreachServiceRateLimited(retry_after)
        if response.status_code != 200:
            raise BreachServiceUnavailable(f"HIBP API error: HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise BreachServiceUnavailable("HIBP returned invalid JSON") from exc
        return [
            item["Name"] for item in payload or [] if isinstance(item, dict) and item.get("Name")
        ]

    async def get_breach(self, name: str) -> BreachRecord | None:
        """Fetch the detail record of a single breach.

        Returns ``None`` when the breach is unknown; raises
        :class:`BreachServiceError` subclasses on any other failure.
        """
        response = await self._get(f"/breach/{quote(name, safe='')}")

        if response.status_code == 404:
            return None
        if response.status_code == 429:
            raise BreachServiceRateLimited(_retry_after(response))
        if response.status_code != 200:
            raise BreachServiceUnavailable(
                f"HIBP breach lookup for {name} failed: HTTP {response.status_code}"
            )
        try:
            payload = response.json()
        except ValueError as exc:
            raise BreachServiceUnavailable(f"HIBP returned invalid JSON for {name}") from exc
        if not isinstance(payload, dict):
            return None
        return BreachRecord.from_api(payload, name=name)
