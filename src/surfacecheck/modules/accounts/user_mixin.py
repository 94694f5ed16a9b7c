"""User operations for AccountStore."""

from datetime import datetime

from surfacecheck.db.models import User
from surfacecheck.modules.breach.models import UserAccount


class UserMixin:
    """Provide user creation, lookup and breach-check bookkeeping."""

    def add_user(self, email: str, name: str = "") -> User:
        """Add a user; emails are stored lower-cased and trimmed."""
        normalized = email.strip().lower()
        if self.session.query(User).filter_by(email=normalized).first():
            raise ValueError(f"User with email {normalized} already exists")

        user = User(email=normalized, name=name.strip())
        self.session.add(user)
        self.session.commit()
        return user

    def get_user_record(self, user_id: int) -> User | None:
        return self.session.get(User, user_id)

    def list_users(self) -> list[User]:
        return self.session.query(User).order_by(User.id).all()

    def get_user(self, user_id: int) -> UserAccount | None:
        """Return the user as a plain record for the breach checker."""
        user = self.get_user_record(user_id)
        if user is None:
            return None
        return UserAccount(id=user.id, email=user.email, name=user.name or "")

    def record_breach_check(self, user_id: int, security_score: int, checked_at: datetime) -> None:
        user = self.get_user_record(user_id)
        if user is None:
            return
        user.last_breach_check = checked_at
        user.security_score = security_score
        self.session.commit()
