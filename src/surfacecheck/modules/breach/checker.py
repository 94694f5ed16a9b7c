"""Breach-check orchestration: query, match, score, persist."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from surfacecheck.config.settings import BreachSettings
from surfacecheck.errors import BreachServiceError, UserNotFound
from surfacecheck.utils.debug import debug_print

from .client import HIBPClient
from .matching import match_services
from .models import (
    BreachMatch,
    BreachRecord,
    BreachReport,
    BreachStatusUpdate,
    UserAccount,
    UserService,
)
from .recommendations import generate_security_recommendations
from .scoring import build_status_updates, calculate_security_score, count_breached_services
from .severity import assess_breach_severity

logger = logging.getLogger(__name__)


class BreachStore(Protocol):
    """Persistence collaborator for breach checks."""

    def get_user(self, user_id: int) -> UserAccount | None: ...

    def list_services(self, user_id: int) -> list[UserService]: ...

    def apply_breach_updates(self, updates: Sequence[BreachStatusUpdate]) -> None: ...

    def record_breach_check(
        self, user_id: int, security_score: int, checked_at: datetime
    ) -> None: ...


@dataclass
class MatchResults:
    matches: list[BreachMatch] = field(default_factory=list)
    details: list[BreachRecord] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


class BreachChecker:
    """Correlate a user's services with the breaches their email appears in."""

    def __init__(self, settings: BreachSettings | None = None):
        self.settings = settings or BreachSettings()

    async def match_breaches(
        self,
        client: HIBPClient,
        breach_names: Sequence[str],
        services: Sequence[UserService],
    ) -> MatchResults:
        """Fetch each breach's details one at a time and match services.

        Detail requests are paced by ``request_delay``; a failed lookup skips
        that breach only.
        """
        results = MatchResults()
        for name in breach_names:
            await asyncio.sleep(self.settings.request_delay)
            try:
                detail = await client.get_breach(name)
            except BreachServiceError as exc:
                logger.error("Error getting breach details for %s: %s", name, exc)
                results.errors.append(f"Breach details unavailable for {name}: {exc}")
                continue
            if detail is None:
                results.errors.append(f"Breach details unavailable for {name}")
                continue

            results.details.append(detail)
            severity = assess_breach_severity(detail)
            for service in match_services(detail, services):
                results.matches.append(
                    BreachMatch(service=service, breach=detail, severity=severity)
                )
                logger.warning(
                    "MATCH: %s (%s) affected by %s breach",
                    service.service_name,
                    service.domain,
                    detail.name,
                )
        return results

    async def check_email(self, email: str, services: Sequence[UserService]) -> BreachReport:
        """Run the breach check for an email without touching any store."""
        async with HIBPClient(self.settings) as client:
            breach_names = await client.get_breached_account(email)
            debug_print("hibp", f"{len(breach_names)} breaches for {email}", Breaches=breach_names)

            if not breach_names:
                return _build_report(0, services, MatchResults())

            logger.info(
                "Found %d breaches, matching against %d services",
                len(breach_names),
                len(services),
            )
            results = await self.match_breaches(client, breach_names, services)

        return _build_report(len(breach_names), services, results)

    async def run_breach_check(self, user_id: int, store: BreachStore) -> BreachReport:
        """Check a stored user and persist breach status for matched services.

        Updates are written only after the full match list is computed.
        """
        user = store.get_user(user_id)
        if user is None:
            raise UserNotFound(user_id)

        services = store.list_services(user_id)
        logger.info("Checking %d services against breaches for user %s", len(services), user_id)

        report = await self.check_email(user.email, services)

        store.apply_breach_updates(build_status_updates(report.matched_breaches))
        store.record_breach_check(user_id, report.security_score, report.last_checked)
        return report


def _build_report(
    breaches_found: int,
    services: Sequence[UserService],
    results: MatchResults,
) -> BreachReport:
    total = len(services)
    breached = count_breached_services(results.matches)
    return BreachReport(
        breaches_found=breaches_found,
        total_services=total,
        security_score=calculate_security_score(results.matches, total),
        breached_services=breached,
        safe_services=total - breached,
        matched_breaches=results.matches,
        breach_details=results.details,
        recommendations=generate_security_recommendations(results.matches),
        errors=results.errors,
    )
