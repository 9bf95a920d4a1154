"""
Command-line interface for Branding Token Check.

Provides a CLI for checking branding tokens in a resource table or in
a single source/target pair.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .config import DEFAULT_TOKEN_COMPARISON_SENSITIVITY, TokenCheckConfig
from .models import LocResource, ResourceCheckResult
from .resource_loader import ResourceLoadError, load_resources
from .token_checker import BrandingTokenChecker

console = Console()

EXIT_ISSUES_FOUND = 2


@click.command()
@click.option(
    "--resources",
    "-r",
    type=click.Path(exists=True, path_type=Path),
    help="Path to resource file (CSV or Excel) with source and target columns.",
)
@click.option(
    "--source",
    type=str,
    help="Source string to check (use with --target).",
)
@click.option(
    "--target",
    type=str,
    help="Translated string to check (use with --source).",
)
@click.option(
    "--sheet",
    type=str,
    default=None,
    help="Sheet name for Excel resource files.",
)
@click.option(
    "--sensitivity",
    type=float,
    default=DEFAULT_TOKEN_COMPARISON_SENSITIVITY,
    show_default=True,
    help="Fraction of a token name's length allowed as edits when detecting misspellings.",
)
@click.option(
    "--skip-removed",
    is_flag=True,
    default=False,
    help="Do not report tokens missing from the translation.",
)
@click.option(
    "--exempt-language",
    "exempt_languages",
    multiple=True,
    help="Language for which missing tokens are not reported (repeatable).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output.",
)
def main(
    resources: Optional[Path],
    source: Optional[str],
    target: Optional[str],
    sheet: Optional[str],
    sensitivity: float,
    skip_removed: bool,
    exempt_languages: tuple[str, ...],
    verbose: bool,
) -> None:
    """
    Branding Token Check - Find corrupted (!Token) markup in translations.

    Reports broken token syntax, misspelled token names, and tokens
    added to or removed from the translation.

    Examples:

        branding-token-check --resources strings.csv

        branding-token-check --source "Open (!Word_Full)" --target "Ouvrir (!Word_Ful)"
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if resources is None and (source is None or target is None):
        console.print("[red]Error:[/red] Must provide either --resources or both --source and --target")
        sys.exit(1)

    if resources is not None and (source is not None or target is not None):
        console.print("[red]Error:[/red] Provide only one of --resources or --source/--target")
        sys.exit(1)

    try:
        config = TokenCheckConfig(
            token_comparison_sensitivity=sensitivity,
            report_removed_tokens=not skip_removed,
            removed_check_exempt_languages=set(exempt_languages),
        )
    except ValueError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        sys.exit(1)

    try:
        if resources is not None:
            items = load_resources(resources, sheet_name=sheet)
            if verbose:
                console.print(f"  Loaded {len(items)} resources from: {resources}")
        else:
            items = [LocResource(resource_id="input", source=source, target=target)]
    except ResourceLoadError as e:
        console.print(f"[red]Resource loading error:[/red] {e}")
        sys.exit(1)

    checker = BrandingTokenChecker.from_config(config)
    results = checker.check_resources(items, config)

    failed = _display_results(results, verbose)

    if failed:
        console.print(f"\n[bold red]{failed} of {len(results)} resources have branding token issues.[/bold red]")
        sys.exit(EXIT_ISSUES_FOUND)

    console.print(f"\n[bold green]OK[/bold green] {len(results)} resources checked, no issues found.")


def _display_results(results: list[ResourceCheckResult], verbose: bool) -> int:
    """Display issue table; return the number of failed resources."""
    failed = [r for r in results if r.has_issues]
    if not failed:
        return 0

    table = Table(title="Branding Token Issues", show_header=True)
    table.add_column("Resource", style="cyan")
    table.add_column("Kind", style="yellow")
    table.add_column("Token", style="green")
    table.add_column("Message")

    for item in failed:
        for issue in item.result.issues:
            table.add_row(
                item.resource.resource_id,
                issue.kind.value,
                issue.token_name,
                issue.message,
            )

    console.print(table)

    if verbose:
        for item in failed:
            console.print(Panel(
                "\n".join(item.messages),
                title=item.resource.resource_id,
                border_style="red",
            ))

    return len(failed)


def run_cli() -> None:
    """Entry point for the CLI."""
    main()


if __name__ == "__main__":
    run_cli()
