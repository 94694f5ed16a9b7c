"""Configuration CLI command."""

import typer

from .deps import cli_module
from .shared import app, console, mask_secret


@app.command()
def config(
    action: str = typer.Argument("show", help="Action: show"),
) -> None:
    """Show effective configuration and API key status."""
    cli = cli_module()

    if action != "show":
        console.print(f"[red]Unknown action: {action}. Use 'show'.[/red]")
        raise typer.Exit(1)

    surface = cli.SurfaceSettings.from_config()
    breach = cli.BreachSettings.from_config()
    console.print(f"[bold]Configuration ({cli.get_global_config_dir()}):[/bold]")
    console.print(f"  HIBP_API_KEY={mask_secret(breach.api_key)}")
    console.print(f"  SHODAN_API_KEY={mask_secret(surface.shodan_api_key)}")
    console.print(f"  SURFACECHECK_DB={cli.get_db_path()}")
    console.print(f"  SURFACECHECK_CONCURRENCY={surface.concurrency}")
    console.print(f"  SURFACECHECK_USER_AGENT={surface.user_agent}")
