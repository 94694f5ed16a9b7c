"""Account persistence used by the CLI."""

from .manager import AccountStore

__all__ = ["AccountStore"]
