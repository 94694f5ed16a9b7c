"""Breach-check CLI command."""

import time

import typer

from surfacecheck.errors import (
    BreachServiceError,
    BreachServiceRateLimited,
    UserNotFound,
)
from surfacecheck.modules.report import print_breach_report, to_json

from .deps import cli_module
from .shared import app, console


@app.command("breach-check")
def breach_check(
    user_id: int = typer.Argument(..., help="Stored user id"),
    json_output: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    retries: int = typer.Option(
        0,
        "--retries",
        help="Retry this many times when the breach service rate-limits the account lookup",
    ),
) -> None:
    """Check a user's email against known breaches and update their services."""
    cli = cli_module()
    store = cli.AccountStore(cli.get_db_path())
    checker = cli.BreachChecker(cli.BreachSettings.from_config())

    try:
        attempt = 0
        while True:
            try:
                report = cli.safe_async_run(checker.run_breach_check(user_id, store))
                break
            except BreachServiceRateLimited as exc:
                if attempt >= retries:
                    raise
                attempt += 1
                console.print(
                    f"[yellow]Rate limited; retrying in {exc.retry_after:.0f}s "
                    f"({attempt}/{retries})[/yellow]"
                )
                time.sleep(exc.retry_after)
    except UserNotFound as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc
    except BreachServiceError as exc:
        console.print(f"[red]Breach check failed: {exc}[/red]")
        raise typer.Exit(1) from exc
    finally:
        store.close()

    if json_output:
        typer.echo(to_json(report))
        return
    print_breach_report(report, console)
