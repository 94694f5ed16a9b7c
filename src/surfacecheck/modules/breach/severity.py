"""Breach severity assessment from exposed data classes and recency."""

from datetime import UTC, datetime

from .models import BreachRecord

HIGH_RISK_DATA = (
    "passwords",
    "email addresses",
    "credit cards",
    "social security numbers",
    "phone numbers",
)
MEDIUM_RISK_DATA = ("usernames", "names", "dates of birth", "postal codes")

# A "month" is 30 days.
RECENT_BREACH_DAYS = 12 * 30


def _exposes(data_classes: list[str], markers: tuple[str, ...]) -> bool:
    lowered = [data.lower() for data in data_classes]
    return any(marker in data for data in lowered for marker in markers)


def _parse_breach_date(value: str) -> datetime | None:
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def assess_breach_severity(breach: BreachRecord, now: datetime | None = None) -> str:
    """Classify a breach as high, medium or low.

    Medium-risk breaches younger than twelve months count as high.
    """
    if _exposes(breach.data_classes, HIGH_RISK_DATA):
        return "high"
    if not _exposes(breach.data_classes, MEDIUM_RISK_DATA):
        return "low"

    breach_date = _parse_breach_date(breach.breach_date)
    if breach_date is None:
        return "medium"
    now = now or datetime.now(UTC)
    age = now - breach_date
    if age.total_seconds() < RECENT_BREACH_DAYS * 86400:
        return "high"
    return "medium"
