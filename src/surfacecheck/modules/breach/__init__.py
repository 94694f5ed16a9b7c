"""Breach correlation against the Have I Been Pwned database."""

from .checker import BreachChecker, BreachStore, MatchResults
from .client import HIBPClient
from .matching import breach_domain, match_services, service_matches_breach
from .models import (
    BreachMatch,
    BreachRecord,
    BreachReport,
    BreachStatusUpdate,
    SecurityRecommendation,
    UserAccount,
    UserService,
)
from .recommendations import generate_security_recommendations
from .scoring import build_status_updates, calculate_security_score, count_breached_services
from .severity import assess_breach_severity

__all__ = [
    "BreachChecker",
    "BreachMatch",
    "BreachRecord",
    "BreachReport",
    "BreachStatusUpdate",
    "BreachStore",
    "HIBPClient",
    "MatchResults",
    "SecurityRecommendation",
    "UserAccount",
    "UserService",
    "assess_breach_severity",
    "breach_domain",
    "build_status_updates",
    "calculate_security_score",
    "count_breached_services",
    "generate_security_recommendations",
    "match_services",
    "service_matches_breach",
]
