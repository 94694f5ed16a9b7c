"""Fuzzy matching of breaches against a user's known services."""

from collections.abc import Iterable

from .models import BreachRecord, UserService


def breach_domain(breach: BreachRecord) -> str:
    """Lower-cased breach domain, or the breach name when the domain is empty."""
    return (breach.domain or breach.name).lower()


def service_matches_breach(service: UserService, breach: BreachRecord) -> bool:
    """Decide whether a breach affects a service.

    Rules, first match wins:
    1. service domain equals the breach domain (case-insensitive)
    2. either domain contains the other
    3. either of service name and breach name contains the other
    """
    service_domain = (service.domain or "").lower()
    target_domain = breach_domain(breach)

    if service_domain == target_domain:
        return True
    if service_domain in target_domain or target_domain in service_domain:
        return True

    service_name = (service.service_name or "").lower()
    breach_name = breach.name.lower()
    return service_name in breach_name or breach_name in service_name


def match_services(breach: BreachRecord, services: Iterable[UserService]) -> list[UserService]:
    """Every service affected by ``breach``, in input order."""
    return [service for service in services if service_matches_breach(service, breach)]
