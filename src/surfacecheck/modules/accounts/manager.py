"""Main AccountStore class."""

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from surfacecheck.db.init import init_db

from .service_mixin import ServiceMixin
from .user_mixin import UserMixin


class AccountStore(UserMixin, ServiceMixin):
    """SQLite-backed store for users, their services and breach status."""

    def __init__(self, db_path: Path):
        self.db_path = db_path
        init_db(self.db_path)
        self.engine = create_engine(f"sqlite:///{db_path}", echo=False)
        session_factory = sessionmaker(bind=self.engine)
        self.session = session_factory()

    def close(self) -> None:
        self.session.close()
        self.engine.dispose()
