"""Tests for the SQLite account store."""

import json
from datetime import UTC, datetime
from pathlib import Path

import pytest

from surfacecheck.db.init import get_session, init_db
from surfacecheck.db.models import Service, User
from surfacecheck.modules.accounts import AccountStore
from surfacecheck.modules.breach import BreachStatusUpdate, UserAccount, UserService


class TestDatabase:
    def test_init_db_creates_parent_and_tables(self, temp_dir: Path):
        db_path = temp_dir / "nested" / "dir" / "test.db"
        init_db(db_path)

        assert db_path.exists()
        session = get_session(db_path)
        try:
            assert session.query(User).count() == 0
            assert session.query(Service).count() == 0
        finally:
            session.close()


class TestUsers:
    """Test user operations."""

    def test_add_user_normalizes_email(self, account_store: AccountStore):
        user = account_store.add_user("  Alice@Example.COM ", "Alice")
        assert user.id is not None
        assert user.email == "alice@example.com"
        assert account_store.get_user(user.id) == UserAccount(
            id=user.id, email="alice@example.com", name="Alice"
        )

    def test_duplicate_email_rejected(self, account_store: AccountStore):
        account_store.add_user("alice@example.com")
        with pytest.raises(ValueError):
            account_store.add_user("ALICE@example.com")

    def test_unknown_user(self, account_store: AccountStore):
        assert account_store.get_user(404) is None

    def test_record_breach_check(self, account_store: AccountStore):
        user = account_store.add_user("alice@example.com")
        checked = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)

        account_store.record_breach_check(user.id, 65, checked)

        record = account_store.get_user_record(user.id)
        assert record.security_score == 65
        assert record.last_breach_check.replace(tzinfo=None) == checked.replace(tzinfo=None)

    def test_list_users_in_creation_order(self, account_store: AccountStore):
        account_store.add_user("b@example.com")
        account_store.add_user("a@example.com")
        assert [u.email for u in account_store.list_users()] == [
            "b@example.com",
            "a@example.com",
        ]


class TestServices:
    """Test service operations and breach-status persistence."""

    def test_add_and_list_services(self, account_store: AccountStore):
        user = account_store.add_user("alice@example.com")
        adobe = account_store.add_service(user.id, "Adobe", "Adobe.com")
        account_store.add_service(user.id, "GitHub", "github.com")

        services = account_store.list_services(user.id)
        assert services[0] == UserService(id=adobe.id, service_name="Adobe", domain="adobe.com")
        assert [s.service_name for s in services] == ["Adobe", "GitHub"]

    def test_add_service_for_unknown_user(self, account_store: AccountStore):
        with pytest.raises(ValueError):
            account_store.add_service(99, "Adobe", "adobe.com")

    @pytest.mark.parametrize(
        ("name", "domain"), [("Adobe", ""), ("Adobe", "   "), ("  ", "adobe.com")]
    )
    def test_blank_name_or_domain_rejected(
        self, account_store: AccountStore, name: str, domain: str
    ):
        user = account_store.add_user("alice@example.com")
        with pytest.raises(ValueError):
            account_store.add_service(user.id, name, domain)
        assert account_store.list_services(user.id) == []

    def test_deactivated_services_are_not_listed(self, account_store: AccountStore):
        user = account_store.add_user("alice@example.com")
        adobe = account_store.add_service(user.id, "Adobe", "adobe.com")

        assert account_store.deactivate_service(adobe.id)
        assert not account_store.deactivate_service(adobe.id)
        assert account_store.list_services(user.id) == []

    def test_apply_breach_updates(self, account_store: AccountStore):
        user = account_store.add_user("alice@example.com")
        adobe = account_store.add_service(user.id, "Adobe", "adobe.com")
        github = account_store.add_service(user.id, "GitHub", "github.com")

        account_store.apply_breach_updates(
            [
                BreachStatusUpdate(
                    service_id=adobe.id,
                    breach_name="Adobe",
                    breach_date="2013-10-04",
                    severity="high",
                    data_classes=["Email addresses", "Passwords"],
                    description="In October 2013...",
                )
            ]
        )

        records = {s.id: s for s in account_store.get_service_records(user.id)}
        assert records[adobe.id].is_breached
        assert records[adobe.id].breach_severity == "high"
        assert json.loads(records[adobe.id].breach_data_classes) == [
            "Email addresses",
            "Passwords",
        ]
        assert records[adobe.id].breach_last_checked is not None
        assert not records[github.id].is_breached
