"""
Command-line interface for Family Tree Memory Maker.

Inspect GEDCOM files, export generation-limited subsets and review
place-name quality from the terminal.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from family_tree import __version__
from family_tree.config import AnalysisConfig
from family_tree.core.filter import export_gedcom, filter_by_generations
from family_tree.core.gedcom import load_gedcom
from family_tree.core.models import GedcomData
from family_tree.places.cleanup import analyze_locations, generate_cleanup_report
from family_tree.places.normalizer import format_place, normalize_place

console = Console()


def _load(path: str) -> GedcomData:
    try:
        return load_gedcom(path)
    except OSError as e:
        raise click.ClickException(f"Cannot read {path}: {e}") from e


@click.group()
@click.version_option(version=__version__, prog_name="family-tree")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx, verbose):
    """
    Family Tree Memory Maker.

    GEDCOM import, generation filtering and location cleanup.
    """
    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = AnalysisConfig.from_env()
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    ctx.obj["verbose"] = verbose

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


# =============================================================================
# GEDCOM Commands
# =============================================================================

@cli.command("stats")
@click.argument("gedcom_file", type=click.Path(exists=True))
def stats(gedcom_file: str):
    """Show people, family and root counts for a GEDCOM file."""
    data = _load(gedcom_file)

    table = Table(title=f"GEDCOM Statistics: {Path(gedcom_file).name}")
    table.add_column("Record Type", style="cyan")
    table.add_column("Count", justify="right")
    for key, value in data.stats().items():
        table.add_row(key.title(), str(value))
    console.print(table)


@cli.command("filter")
@click.argument("gedcom_file", type=click.Path(exists=True))
@click.option("--generations", "-g", type=int, help="Ancestor generations to keep")
@click.option("--from-year", "-y", type=int, help="Reference year for recent people")
@click.option("--output", "-o", type=click.Path(), help="Output file (default: stdout)")
@click.pass_context
def filter_command(ctx, gedcom_file: str, generations: Optional[int],
                   from_year: Optional[int], output: Optional[str]):
    """
    Export recent people and their ancestors.

    People born within the recent window before the reference year are
    kept together with up to N generations of ancestors.
    """
    config: AnalysisConfig = ctx.obj["config"]
    data = _load(gedcom_file)

    filtered = filter_by_generations(
        data,
        generations if generations is not None else config.max_generations,
        from_year=from_year or config.reference_year,
        recent_window=config.recent_window,
    )
    text = export_gedcom(filtered, config.tree_name)

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(
            f"[green]Wrote {len(filtered.people)} of {len(data.people)} people to {output}[/green]"
        )
    else:
        sys.stdout.write(text)


# =============================================================================
# Place Commands
# =============================================================================

@cli.command("normalize")
@click.argument("place")
def normalize(place: str):
    """Show how a place string is parsed."""
    hierarchy = normalize_place(place)

    table = Table(show_header=False)
    table.add_column("Level", style="cyan")
    table.add_column("Value")
    for level in ("site", "city", "county", "state", "region", "country"):
        table.add_row(level.title(), getattr(hierarchy, level) or "-")

    console.print(Panel(table, title=place, subtitle=format_place(hierarchy) or "unrecognized"))


@cli.command("places")
@click.argument("gedcom_file", type=click.Path(exists=True))
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.pass_context
def places(ctx, gedcom_file: str, as_json: bool):
    """Report location issues and merge suggestions."""
    config: AnalysisConfig = ctx.obj["config"]
    data = _load(gedcom_file)

    location_map = analyze_locations(data.people.values())
    report = generate_cleanup_report(location_map, top_limit=config.top_issue_limit)

    if as_json:
        click.echo(report.model_dump_json(indent=2))
        return

    console.print(Panel(
        f"{report.total_locations} locations, {report.total_issues} issues",
        title="Location Cleanup",
    ))

    if report.issues_by_type:
        table = Table(title="Issues by Type")
        table.add_column("Type", style="cyan")
        table.add_column("Count", justify="right")
        for issue_type, count in sorted(report.issues_by_type.items()):
            table.add_row(issue_type, str(count))
        console.print(table)

    if report.clusters:
        confidence_colors = {"high": "green", "medium": "yellow", "low": "red"}
        table = Table(title="Merge Suggestions")
        table.add_column("Canonical", style="bold")
        table.add_column("Variants")
        table.add_column("People", justify="right")
        table.add_column("Confidence")
        for cluster in report.clusters:
            color = confidence_colors[cluster.confidence]
            table.add_row(
                cluster.canonical,
                "\n".join(cluster.variants),
                str(cluster.total_count),
                f"[{color}]{cluster.confidence}[/{color}]",
            )
        console.print(table)

    if report.top_issues:
        table = Table(title="Top Issues")
        table.add_column("Location")
        table.add_column("People", justify="right")
        table.add_column("Issues")
        for entry in report.top_issues:
            table.add_row(
                entry.location,
                str(entry.count),
                "\n".join(issue.message for issue in entry.issues),
            )
        console.print(table)


def main():
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
