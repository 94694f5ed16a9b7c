"""Data models for breach correlation."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass
class BreachRecord:
    """A breach as described by the breach database."""

    name: str
    title: str = ""
    domain: str = ""
    breach_date: str = ""
    data_classes: list[str] = field(default_factory=list)
    description: str = ""
    pwn_count: int = 0
    is_verified: bool = False

    @classmethod
    def from_api(cls, data: dict[str, Any], name: str = "") -> "BreachRecord":
        """Build a record from an HIBP breach payload.

        ``name`` is used when the payload carries no ``Name``.
        """
        return cls(
            name=data.get("Name") or name,
            title=data.get("Title") or "",
            domain=data.get("Domain") or "",
            breach_date=data.get("BreachDate") or "",
            data_classes=list(data.get("DataClasses") or []),
            description=data.get("Description") or "",
            pwn_count=data.get("PwnCount") or 0,
            is_verified=bool(data.get("IsVerified", False)),
        )


@dataclass
class UserAccount:
    id: int
    email: str
    name: str = ""


@dataclass
class UserService:
    """An online service the user is known to have an account with."""

    id: int
    service_name: str
    domain: str


@dataclass
class BreachMatch:
    service: UserService
    breach: BreachRecord
    severity: str
    action_required: bool = True


@dataclass
class BreachStatusUpdate:
    """Persisted breach status for one matched service."""

    service_id: int
    breach_name: str
    breach_date: str
    severity: str
    data_classes: list[str]
    description: str
    is_breached: bool = True
    last_checked: datetime = field(default_factory=_utc_now)


@dataclass
class SecurityRecommendation:
    type: str
    title: str
    message: str
    actions: list[str] = field(default_factory=list)


@dataclass
class BreachReport:
    """Result of a breach check for one user."""

    breaches_found: int
    total_services: int
    security_score: int
    breached_services: int
    safe_services: int
    matched_breaches: list[BreachMatch] = field(default_factory=list)
    breach_details: list[BreachRecord] = field(default_factory=list)
    recommendations: list[SecurityRecommendation] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    last_checked: datetime = field(default_factory=_utc_now)
