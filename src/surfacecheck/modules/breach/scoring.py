"""Security score and persistence updates for matched breaches."""

from collections.abc import Sequence

from .models import BreachMatch, BreachStatusUpdate

PER_MATCH_PENALTY = 15
SEVERITY_DEDUCTIONS = {"high": 20, "medium": 10}
DEFAULT_DEDUCTION = 5


def calculate_security_score(matches: Sequence[BreachMatch], total_services: int) -> int:
    """Fold matches into a 0-100 score; 100 means nothing matched."""
    if total_services == 0:
        return 100

    base_score = max(0, 100 - len(matches) * PER_MATCH_PENALTY)
    deduction = sum(SEVERITY_DEDUCTIONS.get(match.severity, DEFAULT_DEDUCTION) for match in matches)
    return max(0, min(100, base_score - deduction))


def count_breached_services(matches: Sequence[BreachMatch]) -> int:
    """Distinct services with at least one match."""
    return len({match.service.id for match in matches})


def build_status_updates(matches: Sequence[BreachMatch]) -> list[BreachStatusUpdate]:
    """One breach-status update per match, in match order."""
    return [
        BreachStatusUpdate(
            service_id=match.service.id,
            breach_name=match.breach.name,
            breach_date=match.breach.breach_date,
            severity=match.severity,
            data_classes=list(match.breach.data_classes),
            description=match.breach.description,
        )
        for match in matches
    ]
