"""Test configuration and fixtures for SurfaceCheck."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from surfacecheck.config import BreachSettings, SurfaceSettings
from surfacecheck.modules.accounts import AccountStore


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> Path:
    """Keep tests away from the real ~/.surfacecheck and API keys."""
    for key in (
        "HIBP_API_KEY",
        "SHODAN_API_KEY",
        "SURFACECHECK_DB",
        "SURFACECHECK_CONCURRENCY",
        "SURFACECHECK_USER_AGENT",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(Path, "home", lambda: temp_dir)
    return temp_dir / ".surfacecheck"


@pytest.fixture
def db_path(temp_dir: Path) -> Path:
    """Return the database path for the account store."""
    return temp_dir / "data" / "surfacecheck.db"


@pytest.fixture
def account_store(db_path: Path) -> Generator[AccountStore, None, None]:
    """Create an account store with an initialized database."""
    store = AccountStore(db_path)
    yield store
    store.close()


@pytest.fixture
def surface_settings() -> SurfaceSettings:
    """Discovery settings with short timeouts and no enrichment."""
    return SurfaceSettings(subdomain_timeout=1.0, endpoint_timeout=1.0)


@pytest.fixture
def breach_settings() -> BreachSettings:
    """Breach settings with a fake key and no pacing delay."""
    return BreachSettings(api_key="test-hibp-key", request_delay=0)

