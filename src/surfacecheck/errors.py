"""Exception hierarchy for SurfaceCheck.

Per-item failures (one probe, one breach detail, one enrichment lookup) are
collected on the returned reports. Only whole-operation failures propagate to
the caller as one of these exceptions.
"""


class SurfaceCheckError(Exception):
    """Base class for all SurfaceCheck errors."""


class NetworkUnreachable(SurfaceCheckError):
    """A request could not complete (connect, timeout, TLS or redirect failure)."""

    def __init__(self, url: str, message: str, kind: str = "network"):
        super().__init__(f"{url}: {message}")
        self.url = url
        self.kind = kind


class EnrichmentUnavailable(SurfaceCheckError):
    """An internet-host-search lookup failed; enrichment for that host is skipped."""


class BreachServiceError(SurfaceCheckError):
    """Base class for breach-database failures."""


class BreachServiceRateLimited(BreachServiceError):
    """The breach database answered 429; the caller should back off and retry."""

    def __init__(self, retry_after: float = 3.0):
        super().__init__(f"Breach service rate limited, retry after {retry_after:g}s")
        self.retry_after = retry_after


class BreachServiceUnavailable(BreachServiceError):
    """The breach database is not configured or failed in a non-retryable way."""


class UserNotFound(SurfaceCheckError):
    """The user targeted by a breach check does not exist."""

    def __init__(self, user_id: int):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id
