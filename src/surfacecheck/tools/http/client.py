"""Async HTTP client used for probing hosts and calling external APIs."""

import time
from dataclasses import dataclass
from typing import Any

import httpx

from surfacecheck.errors import NetworkUnreachable

DEFAULT_USER_AGENT = "Surface-Checker/1.0"


@dataclass
class HTTPResponse:
    """Represents an HTTP response."""

    url: str
    status_code: int
    headers: dict[str, str]
    body: str
    response_time: float
    content_type: str = ""
    server: str = ""


@dataclass
class ProbeResult:
    """Normalized outcome of a probe that got any HTTP answer."""

    url: str
    status_code: int
    headers: dict[str, str]
    content_type: str
    response_time: float


@dataclass
class ProbeError:
    """A probe that never got an HTTP answer."""

    url: str
    kind: str
    message: str


ProbeOutcome = ProbeResult | ProbeError


def _classify(exc: Exception) -> str:
    if isinstance(exc, httpx.TimeoutException):
        return "timeout"
    if isinstance(exc, httpx.TooManyRedirects):
        return "redirects"
    if isinstance(exc, httpx.ConnectError):
        text = str(exc).upper()
        if "SSL" in text or "CERTIFICATE" in text or "TLS" in text:
            return "tls"
        return "connect"
    return "network"


class HTTPClient:
    """Async HTTP client for probing operations.

    Redirect limits and TLS verification are per client; timeouts may be
    overridden per call.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        max_redirects: int = 5,
        verify_ssl: bool = False,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.timeout = timeout
        self.max_redirects = max_redirects
        self.verify_ssl = verify_ssl
        self.user_agent = user_agent
        self.client: httpx.AsyncClient | None = None

    async def __aenter__(self):
        self.client = httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            max_redirects=self.max_redirects,
            verify=self.verify_ssl,
            headers={"User-Agent": self.user_agent},
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.client:
            await self.client.aclose()

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> HTTPResponse:
        """Make an HTTP request.

        Any status code is returned as a response. Transport failures raise
        :class:`NetworkUnreachable`.
        """
        if not self.client:
            raise RuntimeError("Client not initialized. Use async context manager.")

        start = time.time()
        try:
            response = await self.client.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                timeout=timeout if timeout is not None else self.timeout,
            )
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise NetworkUnreachable(url, str(exc) or type(exc).__name__, _classify(exc)) from exc

        elapsed = time.time() - start

        return HTTPResponse(
            url=str(response.url),
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.text,
            response_time=elapsed,
            content_type=response.headers.get("content-type", ""),
            server=response.headers.get("server", ""),
        )

    async def get(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
    ) -> HTTPResponse:
        """Make a GET request."""
        return await self.request("GET", url, headers=headers, params=params)

    async def probe(
        self,
        url: str,
        method: str = "GET",
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> ProbeOutcome:
        """Probe a URL and return the result as a value instead of raising."""
        try:
            response = await self.request(method, url, headers=headers, timeout=timeout)
        except NetworkUnreachable as exc:
            return ProbeError(url=url, kind=exc.kind, message=str(exc))

        return ProbeResult(
            url=url,
            status_code=response.status_code,
            headers={key.lower(): value for key, value in response.headers.items()},
            content_type=response.content_type,
            response_time=response.response_time,
        )
