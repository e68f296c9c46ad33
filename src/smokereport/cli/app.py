"""Main Typer CLI application for smoke-report."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Annotated

import typer

from smokereport.cli.commands import run_export_results, run_update_scenarios

app = typer.Typer(
    name="smoke-report",
    help="Export Playwright smoke results and update the scenario checklist",
    no_args_is_help=True,
)

RootOption = Annotated[
    Path | None,
    typer.Option(
        "--root",
        help="Project root holding artifacts/ (or set SMOKE_PROJECT_ROOT)",
    ),
]

ReportOption = Annotated[
    Path | None,
    typer.Option(
        "-r",
        "--report",
        help="Use this Playwright JSON report instead of searching the usual locations",
    ),
]


@app.command("export-results")
def export_results(
    root: RootOption = None,
    report: ReportOption = None,
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "-o",
            "--output-dir",
            help="Directory for smoke_results.csv and smoke_results.xlsx",
        ),
    ] = None,
) -> None:
    """Write every test result to CSV and XLSX."""
    # Build args namespace to reuse the command handler
    args = argparse.Namespace(root=root, report=report, output_dir=output_dir)
    raise typer.Exit(code=run_export_results(args))


@app.command("update-scenarios")
def update_scenarios(
    root: RootOption = None,
    report: ReportOption = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "-o",
            "--output",
            help="Checklist file to write (default: smoke_scenarios.md)",
        ),
    ] = None,
    scenarios: Annotated[
        Path | None,
        typer.Option(
            "-s",
            "--scenarios",
            help="YAML scenario catalog replacing the built-in one",
        ),
    ] = None,
) -> None:
    """Tick off smoke scenarios whose tests all passed."""
    args = argparse.Namespace(root=root, report=report, output=output, scenarios=scenarios)
    raise typer.Exit(code=run_update_scenarios(args))


def main() -> None:
    """Entry point for the Typer CLI."""
    app()
