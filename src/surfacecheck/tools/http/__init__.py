"""HTTP helpers for SurfaceCheck."""

from .client import HTTPClient, HTTPResponse, ProbeError, ProbeOutcome, ProbeResult

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "ProbeError",
    "ProbeOutcome",
    "ProbeResult",
]
