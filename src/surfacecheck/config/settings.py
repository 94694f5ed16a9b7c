"""Settings objects injected into the discovery and breach components."""

from dataclasses import dataclass

from surfacecheck.tools.http.client import DEFAULT_USER_AGENT

from .getters import get_concurrency, get_hibp_api_key, get_shodan_api_key, get_user_agent


@dataclass
class SurfaceSettings:
    """Timeouts, limits and keys for attack-surface discovery."""

    subdomain_timeout: float = 5.0
    subdomain_max_redirects: int = 5
    endpoint_timeout: float = 10.0
    endpoint_max_redirects: int = 3
    user_agent: str = DEFAULT_USER_AGENT
    concurrency: int = 1
    shodan_api_key: str | None = None
    shodan_delay: float = 1.0
    shodan_timeout: float = 10.0

    @classmethod
    def from_config(cls, **overrides) -> "SurfaceSettings":
        settings = cls(
            user_agent=get_user_agent() or DEFAULT_USER_AGENT,
            concurrency=get_concurrency(),
            shodan_api_key=get_shodan_api_key(),
        )
        for key, value in overrides.items():
            if value is not None:
                setattr(settings, key, value)
        return settings


@dataclass
class BreachSettings:
    """Connection and pacing settings for the breach database."""

    api_key: str | None = None
    base_url: str = "https://haveibeenpwned.com/api/v3"
    timeout: float = 10.0
    request_delay: float = 1.5
    user_agent: str = "SurfaceCheck-Breach-Monitor"

    @classmethod
    def from_config(cls, **overrides) -> "BreachSettings":
        settings = cls(api_key=get_hibp_api_key())
        for key, value in overrides.items():
            if value is not None:
                setattr(settings, key, value)
        return settings
