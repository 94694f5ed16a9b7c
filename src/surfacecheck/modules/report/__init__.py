"""Report rendering for SurfaceCheck."""

from .console_report import print_breach_report, print_discovery_report, print_surface_report
from .json_report import to_dict, to_json

__all__ = [
    "print_breach_report",
    "print_discovery_report",
    "print_surface_report",
    "to_dict",
    "to_json",
]
