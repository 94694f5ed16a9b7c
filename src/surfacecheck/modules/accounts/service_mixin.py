"""Service operations for AccountStore."""

import json
from collections.abc import Sequence

from surfacecheck.db.models import Service, User
from surfacecheck.modules.breach.models import BreachStatusUpdate, UserService


class ServiceMixin:
    """Provide service CRUD and breach-status persistence."""

    def add_service(self, user_id: int, service_name: str, domain: str) -> Service:
        """Add a service; blank names or domains are rejected.

        An empty value would be a substring of every breach and match them all.
        """
        service_name = service_name.strip()
        domain = domain.strip().lower()
        if not service_name or not domain:
            raise ValueError("Service name and domain must not be empty")
        if self.session.get(User, user_id) is None:
            raise ValueError(f"User {user_id} not found")

        service = Service(user_id=user_id, service_name=service_name, domain=domain)
        self.session.add(service)
        self.session.commit()
        return service

    def get_service_records(self, user_id: int) -> list[Service]:
        """Active services for a user, oldest first."""
        return (
            self.session.query(Service)
            .filter_by(user_id=user_id, is_active=True)
            .order_by(Service.id)
            .all()
        )

    def list_services(self, user_id: int) -> list[UserService]:
        """Active services as plain records for the breach checker."""
        return [
            UserService(id=service.id, service_name=service.service_name, domain=service.domain)
            for service in self.get_service_records(user_id)
        ]

    def deactivate_service(self, service_id: int) -> bool:
        service = self.session.get(Service, service_id)
        if service is None or not service.is_active:
            return False
        service.is_active = False
        self.session.commit()
        return True

    def apply_breach_updates(self, updates: Sequence[BreachStatusUpdate]) -> None:
        """Write breach status onto matched services in one transaction.

        When one service matches several breaches, the last update wins.
        """
        for update in updates:
            service = self.session.get(Service, update.service_id)
            if service is None:
                continue
            service.is_breached = update.is_breached
            service.breach_name = update.breach_name
            service.breach_date = update.breach_date
            service.breach_severity = update.severity
            service.breach_data_classes = json.dumps(update.data_classes)
            service.breach_description = update.description
            service.breach_last_checked = update.last_checked
        self.session.commit()
