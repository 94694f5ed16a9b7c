"""Tools package for SurfaceCheck."""

from surfacecheck.tools.http import HTTPClient, HTTPResponse, ProbeError, ProbeResult

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "ProbeError",
    "ProbeResult",
]
