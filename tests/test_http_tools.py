"""Tests for HTTP tools module."""

import httpx
import pytest
import respx
from httpx import Response

from surfacecheck.errors import NetworkUnreachable
from surfacecheck.tools.http import HTTPClient, ProbeError, ProbeResult
from surfacecheck.tools.http.client import DEFAULT_USER_AGENT


class TestHTTPClient:
    """Test HTTPClient functionality."""

    @respx.mock
    async def test_get_request(self):
        """Test basic GET request."""
        respx.get("https://example.com").mock(return_value=Response(200, text="Hello World"))

        async with HTTPClient() as client:
            response = await client.get("https://example.com")

        assert response.status_code == 200
        assert response.body == "Hello World"
        assert response.url == "https://example.com"

    @respx.mock
    async def test_sends_user_agent(self):
        """Probes identify themselves with the scanner user agent."""
        route = respx.get("https://example.com").mock(return_value=Response(200))

        async with HTTPClient() as client:
            await client.get("https://example.com")

        assert route.calls.last.request.headers["user-agent"] == DEFAULT_USER_AGENT

    @respx.mock
    async def test_error_status_is_a_response(self):
        """4xx and 5xx answers are returned, not raised."""
        respx.get("https://example.com/missing").mock(return_value=Response(404))

        async with HTTPClient() as client:
            response = await client.get("https://example.com/missing")

        assert response.status_code == 404

    @respx.mock
    async def test_transport_failure_raises_network_unreachable(self):
        """Connection failures surface as NetworkUnreachable."""
        respx.get("https://down.example.com").mock(side_effect=httpx.ConnectError)

        async with HTTPClient() as client:
            with pytest.raises(NetworkUnreachable) as exc_info:
                await client.get("https://down.example.com")

        assert exc_info.value.kind == "connect"
        assert exc_info.value.url == "https://down.example.com"

    async def test_request_requires_context_manager(self):
        client = HTTPClient()
        with pytest.raises(RuntimeError):
            await client.get("https://example.com")


class TestProbe:
    """Test probe normalization."""

    @respx.mock
    async def test_probe_lowercases_headers(self):
        respx.get("https://api.example.com/health").mock(
            return_value=Response(
                200,
                headers={"Server": "nginx", "Content-Type": "application/json"},
            )
        )

        async with HTTPClient() as client:
            outcome = await client.probe("https://api.example.com/health")

        assert isinstance(outcome, ProbeResult)
        assert outcome.url == "https://api.example.com/health"
        assert outcome.status_code == 200
        assert outcome.headers["server"] == "nginx"
        assert outcome.content_type == "application/json"

    @respx.mock
    async def test_probe_timeout_is_an_error_value(self):
        respx.get("https://slow.example.com").mock(side_effect=httpx.ConnectTimeout)

        async with HTTPClient(timeout=0.5) as client:
            outcome = await client.probe("https://slow.example.com")

        assert isinstance(outcome, ProbeError)
        assert outcome.kind == "timeout"

    @respx.mock
    async def test_probe_redirect_loop_is_an_error_value(self):
        respx.get("https://loop.example.com/").mock(
            return_value=Response(302, headers={"Location": "https://loop.example.com/"})
        )

        async with HTTPClient(max_redirects=3) as client:
            outcome = await client.probe("https://loop.example.com/")

        assert isinstance(outcome, ProbeError)
        assert outcome.kind == "redirects"

    @respx.mock
    async def test_probe_follows_redirects(self):
        respx.get("http://www.example.com").mock(
            return_value=Response(301, headers={"Location": "https://www.example.com/"})
        )
        respx.get("https://www.example.com/").mock(return_value=Response(200))

        async with HTTPClient() as client:
            outcome = await client.probe("http://www.example.com")

        assert isinstance(outcome, ProbeResult)
        assert outcome.status_code == 200
        assert outcome.url == "http://www.example.com"
