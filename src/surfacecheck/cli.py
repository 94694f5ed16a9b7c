"""SurfaceCheck CLI facade and command registration."""

from surfacecheck.config import (
    BreachSettings,
    SurfaceSettings,
    get_db_path,
    get_global_config_dir,
)
from surfacecheck.modules.accounts import AccountStore
from surfacecheck.modules.breach import BreachChecker
from surfacecheck.modules.surface import SurfaceService
from surfacecheck.utils.async_utils import safe_async_run

from .cli_commands.shared import app, console

# Register commands on the shared app.
from .cli_commands import account_commands as _account_commands  # noqa: F401
from .cli_commands import breach_command as _breach_command  # noqa: F401
from .cli_commands import config_command as _config_command  # noqa: F401
from .cli_commands import scan_command as _scan_command  # noqa: F401
from .cli_commands.breach_command import breach_check
from .cli_commands.scan_command import discover, scan


@app.command()
def version() -> None:
    """Show the installed SurfaceCheck version."""
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as pkg_version

    try:
        current_version = pkg_version("surfacecheck")
    except PackageNotFoundError:
        current_version = "0.0.0+unknown"

    console.print(f"SurfaceCheck {current_version}")


def main() -> None:
    app()


__all__ = [
    "AccountStore",
    "BreachChecker",
    "BreachSettings",
    "SurfaceService",
    "SurfaceSettings",
    "app",
    "breach_check",
    "console",
    "discover",
    "get_db_path",
    "get_global_config_dir",
    "main",
    "safe_async_run",
    "scan",
    "version",
]
