"""Rich console rendering of scan and breach reports."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from surfacecheck.modules.breach.models import BreachReport
from surfacecheck.modules.surface.models import (
    DomainDiscoveryReport,
    SurfaceReport,
    Vulnerability,
)

SEVERITY_STYLES = {"high": "red", "medium": "yellow", "low": "cyan"}


def _score_style(score: int, high_is_good: bool) -> str:
    bad = score < 50 if high_is_good else score >= 7
    fair = score < 80 if high_is_good else score >= 4
    if bad:
        return "red"
    if fair:
        return "yellow"
    return "green"


def _findings_table(vulnerabilities: list[Vulnerability], title: str) -> Table:
    table = Table(title=title, show_lines=False)
    table.add_column("Severity")
    table.add_column("Type")
    table.add_column("Location", overflow="fold")
    table.add_column("Evidence", overflow="fold")
    for vuln in vulnerabilities:
        style = SEVERITY_STYLES.get(vuln.severity, "white")
        table.add_row(
            f"[{style}]{vuln.severity.upper()}[/{style}]",
            vuln.type.value,
            vuln.evidence.location,
            vuln.evidence.response or "",
        )
    return table


def print_surface_report(report: SurfaceReport, console: Console) -> None:
    """Print a quick-scan summary."""
    style = _score_style(report.risk_score, high_is_good=False)
    breakdown = report.severity_breakdown
    console.print(
        Panel(
            f"[bold]Subdomains:[/bold] {report.subdomains}\n"
            f"[bold]Endpoints:[/bold] {report.endpoints}\n"
            f"[bold]Findings:[/bold] {report.vulnerabilities} "
            f"({breakdown.high} high, {breakdown.medium} medium, {breakdown.low} low)\n"
            f"[bold]Risk score:[/bold] [{style}]{report.risk_score}/10[/{style}]",
            title=f"Surface Scan: {report.domain}",
            border_style="blue",
        )
    )
    if report.top_issues:
        console.print(_findings_table(report.top_issues, "Top issues"))
    for error in report.errors:
        console.print(f"[yellow]! {error.tool}: {error.message}[/yellow]")


def print_discovery_report(report: DomainDiscoveryReport, console: Console) -> None:
    """Print every discovered host, endpoint and finding."""
    discovery = report.discovery

    hosts = Table(title=f"Subdomains of {report.domain}")
    hosts.add_column("Subdomain")
    hosts.add_column("Protocol")
    hosts.add_column("Status")
    hosts.add_column("IP")
    hosts.add_column("Ports")
    for record in discovery.subdomains:
        hosts.add_row(
            record.subdomain,
            record.protocol,
            str(record.status_code),
            record.ip_address or "",
            ", ".join(str(port) for port in record.ports),
        )
    console.print(hosts)

    endpoints = Table(title="Endpoints")
    endpoints.add_column("URL", overflow="fold")
    endpoints.add_column("Status")
    endpoints.add_column("Content-Type", overflow="fold")
    endpoints.add_column("Auth")
    for endpoint in discovery.endpoints:
        endpoints.add_row(
            endpoint.url,
            str(endpoint.status_code),
            endpoint.content_type,
            "required" if endpoint.requires_auth else "",
        )
    console.print(endpoints)

    if report.vulnerabilities:
        console.print(_findings_table(report.vulnerabilities, "Findings"))
    summary = report.summary
    console.print(
        f"[bold]Total findings:[/bold] {summary.total} "
        f"([red]{summary.high} high[/red], [yellow]{summary.medium} medium[/yellow], "
        f"[cyan]{summary.low} low[/cyan])"
    )
    for error in discovery.errors:
        console.print(f"[yellow]! {error.tool}: {error.message}[/yellow]")


def print_breach_report(report: BreachReport, console: Console) -> None:
    """Print a breach-check summary with matched services and advice."""
    style = _score_style(report.security_score, high_is_good=True)
    console.print(
        Panel(
            f"[bold]Breaches found:[/bold] {report.breaches_found}\n"
            f"[bold]Services:[/bold] {report.total_services} "
            f"({report.breached_services} breached, {report.safe_services} safe)\n"
            f"[bold]Security score:[/bold] [{style}]{report.security_score}/100[/{style}]",
            title="Breach Check",
            border_style="blue",
        )
    )

    if report.matched_breaches:
        table = Table(title="Affected services")
        table.add_column("Service")
        table.add_column("Domain")
        table.add_column("Breach")
        table.add_column("Date")
        table.add_column("Severity")
        for match in report.matched_breaches:
            sev_style = SEVERITY_STYLES.get(match.severity, "white")
            table.add_row(
                match.service.service_name,
                match.service.domain,
                match.breach.name,
                match.breach.breach_date,
                f"[{sev_style}]{match.severity.upper()}[/{sev_style}]",
            )
        console.print(table)

    for rec in report.recommendations:
        console.print(f"[bold]{rec.title}[/bold] {rec.message}")
        for action in rec.actions:
            console.print(f"  • {action}")
    for error in report.errors:
        console.print(f"[yellow]! {error}[/yellow]")
