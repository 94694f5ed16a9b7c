"""Attack-surface scan CLI commands."""

import typer

from surfacecheck.errors import SurfaceCheckError
from surfacecheck.modules.report import (
    print_discovery_report,
    print_surface_report,
    to_json,
)

from .deps import cli_module
from .shared import app, console


def _build_service(concurrency: int | None):
    cli = cli_module()
    if concurrency is not None and concurrency < 1:
        console.print("[red]--concurrency must be at least 1[/red]")
        raise typer.Exit(1)
    settings = cli.SurfaceSettings.from_config(concurrency=concurrency)
    return cli.SurfaceService(settings)


@app.command()
def scan(
    domain: str = typer.Argument(..., help="Domain to scan (e.g. example.com)"),
    json_output: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    concurrency: int | None = typer.Option(
        None,
        "--concurrency",
        "-c",
        help="Concurrent probes (default from SURFACECHECK_CONCURRENCY, 1 = sequential)",
    ),
) -> None:
    """Quick scan: discover, check and score a domain's attack surface."""
    cli = cli_module()
    service = _build_service(concurrency)

    if not json_output:
        console.print(f"[blue]Scanning attack surface of {domain}...[/blue]")
    try:
        report = cli.safe_async_run(service.quick_scan(domain))
    except SurfaceCheckError as exc:
        console.print(f"[red]Scan failed: {exc}[/red]")
        raise typer.Exit(1) from exc

    if json_output:
        typer.echo(to_json(report))
        return
    print_surface_report(report, console)


@app.command()
def discover(
    domain: str = typer.Argument(..., help="Domain to enumerate (e.g. example.com)"),
    json_output: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    concurrency: int | None = typer.Option(
        None,
        "--concurrency",
        "-c",
        help="Concurrent probes (default from SURFACECHECK_CONCURRENCY, 1 = sequential)",
    ),
) -> None:
    """Full discovery: list subdomains, endpoints and every finding."""
    cli = cli_module()
    service = _build_service(concurrency)

    if not json_output:
        console.print(f"[blue]Discovering {domain}...[/blue]")
    try:
        report = cli.safe_async_run(service.discover(domain))
    except SurfaceCheckError as exc:
        console.print(f"[red]Discovery failed: {exc}[/red]")
        raise typer.Exit(1) from exc

    if json_output:
        typer.echo(to_json(report))
        return
    print_discovery_report(report, console)
