#!/usr/bin/env python3
"""
AI Presence Analytics CLI - score AI platform responses from your terminal

Works on exported query records (JSON), no API keys needed:
- analyze: Full analytics - scores, benchmark, insights, recommendations
- sources: Which domains the AI platforms cite, and where
- changes: What changed between two audits

Usage:
    presence analyze records.json --entity-type company --industry technology
    presence sources records.json
    presence changes current.json previous.json
"""

import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from analyzer import analyze_audit
from monitoring import analyze_sources_for_audit, detect_changes
from records import AnalyticsError, EntityType, QueryRecord
from scoring import calculate_grade, calculate_presence_band

console = Console()

CONFIG_DIR = Path.home() / ".presence-analytics"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_ENTITY_TYPE = EntityType.COMPANY.value
DEFAULT_INDUSTRY = "default"


def get_config() -> dict:
    """Load configuration."""
    if not CONFIG_FILE.exists():
        return {}
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (OSError, ValueError):
        return {}


def save_config(config: dict) -> None:
    """Save configuration."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(config, indent=2))


def load_records(path: str) -> List[QueryRecord]:
    """Read query records from a JSON export.

    Accepts either a bare list of records or an object with a "records" key.
    """
    data: Any = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("records", [])
    if not isinstance(data, list):
        raise AnalyticsError(f"{path}: expected a list of query records")
    return [QueryRecord.from_dict(item) for item in data]


def fail(message: str) -> None:
    console.print(f"\n[red]Error:[/red] {message}")
    sys.exit(1)


@click.group()
@click.version_option(version="1.0.0")
def cli():
    """
    AI Presence Analytics - scores how AI platforms represent an entity.
    """
    pass


@cli.command()
@click.argument("records_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--entity-type", "-t", type=click.Choice(["person", "company"]), default=None,
              help="Entity kind (default from config, else company)")
@click.option("--industry", "-i", default=None, help="Industry for benchmarking")
@click.option("--output", "-o", default=None, help="Output file (json)")
@click.option("--verbose", "-v", is_flag=True, help="Show detailed results")
def analyze(records_file: str, entity_type: Optional[str], industry: Optional[str],
            output: Optional[str], verbose: bool):
    """
    Run full analytics over an audit's query records.

    Example:
        presence analyze records.json
        presence analyze records.json -t person -i finance -v
    """
    config = get_config()
    entity_type = entity_type or config.get("entity_type") or DEFAULT_ENTITY_TYPE
    industry = industry or config.get("industry") or DEFAULT_INDUSTRY

    try:
        records = load_records(records_file)
        result = analyze_audit(records, entity_type, industry)
    except (AnalyticsError, OSError, ValueError) as e:
        fail(str(e))

    data = result.to_dict()
    score = result.overall_score
    grade = calculate_grade(result.benchmark.percentile)
    band = calculate_presence_band(result.benchmark.percentile)

    grade_colors = {"A+": "green", "A": "green", "B": "yellow", "C": "orange1", "D": "red", "F": "red"}
    grade_color = grade_colors.get(grade, "white")

    console.print()
    console.print(Panel(
        f"[bold]Score:[/bold] [{grade_color}]{score:.1f}/100[/{grade_color}]  "
        f"[bold]Grade:[/bold] [{grade_color}]{grade}[/{grade_color}]  "
        f"[bold]Band:[/bold] {band}\n\n"
        f"[bold]Benchmark:[/bold] {result.benchmark.industry} "
        f"(avg {result.benchmark.average_score:.0f}) - "
        f"percentile {result.benchmark.percentile}\n\n"
        f"[bold]Records:[/bold] {len(records)}  "
        f"[bold]Sources:[/bold] {result.source_analysis.total_sources}  "
        f"[bold]Entity:[/bold] {entity_type}",
        title="[bold green]AI Presence Results[/bold green]",
        border_style="green"
    ))

    table = Table(title="Dimension Scores", show_header=True, header_style="bold")
    table.add_column("Dimension", style="cyan")
    table.add_column("Score", justify="right")
    for name, value in result.scores.model_dump().items():
        table.add_row(name.replace("_", " ").title(), f"{value:.1f}")
    console.print(table)

    insights = result.insights
    for label, items, style in (
        ("Strength", insights.strengths, "green"),
        ("Weakness", insights.weaknesses, "red"),
        ("Opportunity", insights.opportunities, "cyan"),
        ("Threat", insights.threats, "orange1"),
    ):
        for item in items:
            console.print(f"[{style}]{label}:[/{style}] {item}")

    if verbose:
        console.print()
        rec_table = Table(title="Recommendations", show_header=True, header_style="bold")
        rec_table.add_column("Priority", width=10)
        rec_table.add_column("Category", style="cyan")
        rec_table.add_column("Title")
        rec_table.add_column("Timeline", style="dim")
        priority_styles = {"critical": "red", "high": "orange1", "medium": "yellow", "low": "dim"}
        for rec in result.recommendations:
            style = priority_styles.get(rec.priority, "white")
            rec_table.add_row(f"[{style}]{rec.priority}[/{style}]", rec.category, rec.title, rec.timeline)
        console.print(rec_table)

        if result.platform_comparison:
            console.print()
            platform_table = Table(title="Platform Comparison", show_header=True, header_style="bold")
            platform_table.add_column("Platform", style="cyan")
            platform_table.add_column("Visibility", justify="right")
            platform_table.add_column("Sentiment", justify="right")
            platform_table.add_column("Completeness", justify="right")
            platform_table.add_column("Sources", justify="right")
            platform_table.add_column("Quality", justify="right")
            for row in result.platform_comparison:
                platform_table.add_row(
                    row.platform,
                    f"{row.visibility:.1f}",
                    f"{row.sentiment:.1f}",
                    f"{row.completeness:.1f}",
                    str(row.source_count),
                    f"{row.response_quality:.1f}",
                )
            console.print(platform_table)

    if output:
        Path(output).write_text(json.dumps(data, indent=2, default=str))
        console.print(f"\n[dim]Saved to:[/dim] [cyan]{output}[/cyan]")
    console.print()


@cli.command()
@click.argument("records_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--limit", "-n", default=10, help="Number of domains to show")
def sources(records_file: str, limit: int):
    """
    Show which domains the AI platforms cite.

    Example:
        presence sources records.json -n 20
    """
    try:
        analysis = analyze_sources_for_audit(load_records(records_file))
    except (AnalyticsError, OSError, ValueError) as e:
        fail(str(e))

    console.print()
    table = Table(title=f"Cited Domains ({analysis.total_sources})", show_header=True, header_style="bold")
    table.add_column("Domain", style="cyan")
    table.add_column("Citations", justify="right")
    table.add_column("Platforms")
    for source in analysis.sources[:limit]:
        table.add_row(source.domain, str(source.count), ", ".join(source.platforms))
    console.print(table)
    console.print()


@cli.command()
@click.argument("current_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("previous_file", type=click.Path(exists=True, dir_okay=False), required=False)
def changes(current_file: str, previous_file: Optional[str]):
    """
    Compare an audit with the previous one.

    Example:
        presence changes current.json previous.json
    """
    try:
        current = load_records(current_file)
        previous = load_records(previous_file) if previous_file else None
        report = detect_changes(current, previous)
    except (AnalyticsError, OSError, ValueError) as e:
        fail(str(e))

    console.print()
    if report.is_first_audit:
        console.print("[dim]First audit - nothing to compare against.[/dim]\n")
        return

    if not report.changes:
        console.print("[green]No changes detected.[/green]\n")
        return

    change_styles = {"major": "red", "moderate": "yellow", "minor": "dim"}
    table = Table(title=f"Changes ({report.total_changes})", show_header=True, header_style="bold")
    table.add_column("Platform", style="cyan")
    table.add_column("Change")
    table.add_column("Similarity", justify="right")
    table.add_column("Length", justify="right")
    for change in report.changes:
        style = change_styles.get(change.change_type, "white")
        table.add_row(
            change.platform,
            f"[{style}]{change.change_type}[/{style}]",
            f"{change.similarity:.0%}",
            f"{change.length_change:+d}",
        )
    console.print(table)
    console.print()


@cli.command()
@click.option("--entity-type", "-t", type=click.Choice(["person", "company"]), default=None)
@click.option("--industry", "-i", default=None)
def config(entity_type: Optional[str], industry: Optional[str]):
    """Set default entity type and industry."""
    current_config = get_config()

    if entity_type is None:
        entity_type = click.prompt(
            "Default entity type",
            type=click.Choice(["person", "company"]),
            default=current_config.get("entity_type", DEFAULT_ENTITY_TYPE),
        )
    if industry is None:
        industry = click.prompt(
            "Default industry",
            default=current_config.get("industry", DEFAULT_INDUSTRY),
        )

    current_config["entity_type"] = entity_type
    current_config["industry"] = industry.strip()
    current_config["updated_at"] = datetime.now().isoformat()
    save_config(current_config)

    console.print()
    console.print(Panel(
        "[bold green]Configuration saved![/bold green]\n\n"
        f"Config file: [dim]{CONFIG_FILE}[/dim]",
        border_style="green"
    ))
    console.print()


@cli.command()
def check():
    """Show effective configuration."""
    current_config = get_config()

    table = Table(show_header=False)
    table.add_column("Setting", style="dim")
    table.add_column("Value")
    table.add_row("Config file", str(CONFIG_FILE) if CONFIG_FILE.exists() else "[dim]not created[/dim]")
    table.add_row("Entity type", current_config.get("entity_type", f"{DEFAULT_ENTITY_TYPE} (default)"))
    table.add_row("Industry", current_config.get("industry", f"{DEFAULT_INDUSTRY} (default)"))

    console.print()
    console.print(table)
    console.print()


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
