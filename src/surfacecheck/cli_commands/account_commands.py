"""User and monitored-service CLI commands."""

import typer
from rich.table import Table

from .deps import cli_module
from .shared import app, console

user_app = typer.Typer(help="Manage monitored users", no_args_is_help=True)
service_app = typer.Typer(help="Manage a user's monitored services", no_args_is_help=True)
app.add_typer(user_app, name="user")
app.add_typer(service_app, name="service")


def _open_store():
    cli = cli_module()
    return cli.AccountStore(cli.get_db_path())


@user_app.command("add")
def user_add(
    email: str = typer.Argument(..., help="Email address to monitor"),
    name: str = typer.Option("", "--name", "-n", help="Display name"),
) -> None:
    """Add a user."""
    store = _open_store()
    try:
        user = store.add_user(email, name)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc
    finally:
        store.close()
    console.print(f"[green]Added user {user.id}:[/green] {user.email}")


@user_app.command("list")
def user_list() -> None:
    """List users with their last security score."""
    store = _open_store()
    try:
        users = store.list_users()
        if not users:
            console.print("[dim]No users yet. Add one with 'surfacecheck user add'.[/dim]")
            return

        table = Table(title="Users")
        table.add_column("ID", justify="right")
        table.add_column("Email", style="cyan")
        table.add_column("Name")
        table.add_column("Score", justify="right")
        table.add_column("Last Check")
        for user in users:
            score = "-" if user.security_score is None else str(user.security_score)
            checked = (
                user.last_breach_check.strftime("%Y-%m-%d %H:%M")
                if user.last_breach_check
                else "never"
            )
            table.add_row(str(user.id), user.email, user.name or "", score, checked)
        console.print(table)
    finally:
        store.close()


@service_app.command("add")
def service_add(
    user_id: int = typer.Argument(..., help="Owning user id"),
    service_name: str = typer.Argument(..., help="Service name (e.g. Netflix)"),
    domain: str = typer.Argument(..., help="Service domain (e.g. netflix.com)"),
) -> None:
    """Add a monitored service for a user."""
    store = _open_store()
    try:
        service = store.add_service(user_id, service_name, domain)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc
    finally:
        store.close()
    console.print(f"[green]Added service {service.id}:[/green] {service.service_name}")


@service_app.command("list")
def service_list(user_id: int = typer.Argument(..., help="Owning user id")) -> None:
    """List a user's active services and their breach status."""
    store = _open_store()
    try:
        services = store.get_service_records(user_id)
        if not services:
            console.print(f"[dim]No active services for user {user_id}.[/dim]")
            return

        table = Table(title=f"Services for user {user_id}")
        table.add_column("ID", justify="right")
        table.add_column("Service", style="cyan")
        table.add_column("Domain")
        table.add_column("Status")
        table.add_column("Breach")
        for service in services:
            if service.is_breached:
                status = f"[red]BREACHED ({service.breach_severity})[/red]"
            else:
                status = "[green]safe[/green]"
            table.add_row(
                str(service.id),
                service.service_name,
                service.domain,
                status,
                service.breach_name or "",
            )
        console.print(table)
    finally:
        store.close()


@service_app.command("remove")
def service_remove(service_id: int = typer.Argument(..., help="Service id")) -> None:
    """Stop monitoring a service."""
    store = _open_store()
    try:
        removed = store.deactivate_service(service_id)
    finally:
        store.close()
    if not removed:
        console.print(f"[red]Service {service_id} not found[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Service {service_id} removed[/green]")
