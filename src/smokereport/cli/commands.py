"""Command handlers for the smoke-report CLI."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from pathlib import Path

from rich.console import Console

from smokereport.config import Settings, get_settings
from smokereport.core.exceptions import ReportNotFound, ReportUnreadable, ScenarioCatalogError
from smokereport.core.models import NormalizedRecord, ResultSummary
from smokereport.exporters.checklist import write_checklist
from smokereport.exporters.tabular import write_csv, write_workbook
from smokereport.logging import configure_logging, get_logger
from smokereport.reports import (
    export_candidates,
    load_report,
    locate_report,
    normalize_report,
    scenario_candidates,
)
from smokereport.scenarios import DEFAULT_SCENARIOS, aggregate_statuses, load_scenarios, map_scenarios

logger = get_logger(__name__)

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def _echo(message: str) -> None:
    console.print(message, markup=False, soft_wrap=True)


def _fail(message: str) -> int:
    err_console.print(f"❌ {message}", markup=False, soft_wrap=True, style="red")
    return 1


def _prepare(args: argparse.Namespace) -> Settings:
    """Apply per-run overrides to the settings and set up logging."""
    settings = get_settings()
    root = getattr(args, "root", None)
    if root is not None:
        settings = settings.model_copy(update={"project_root": root})

    configure_logging(settings.log_level, settings.log_json_format)
    return settings


def _load(candidates: Iterable[Path], settings: Settings) -> tuple[Path, list[NormalizedRecord]]:
    """Locate and parse the report, returning (path, records)."""
    report_path = locate_report(candidates, hint=settings.smoke_command)
    records = normalize_report(load_report(report_path))
    logger.info(
        "report_loaded",
        path=str(report_path),
        summary=ResultSummary.from_records(records).text,
    )
    return report_path, records


def run_export_results(args: argparse.Namespace) -> int:
    """Run the export-results command."""
    settings = _prepare(args)

    report = getattr(args, "report", None)
    candidates = [report] if report else export_candidates(settings.artifacts_path)

    try:
        _, records = _load(candidates, settings)
    except (ReportNotFound, ReportUnreadable) as e:
        return _fail(str(e))

    output_dir = getattr(args, "output_dir", None) or settings.artifacts_path
    csv_path = write_csv(
        records,
        output_dir / f"{settings.results_basename}.csv",
        settings.error_max_length,
    )
    xlsx_path = write_workbook(
        records,
        output_dir / f"{settings.results_basename}.xlsx",
        settings.error_max_length,
    )
    logger.info("results_exported", rows=len(records), csv=str(csv_path), xlsx=str(xlsx_path))

    _echo(f"Results: {ResultSummary.from_records(records).text}")
    _echo("✅ Wrote:")
    _echo(f" - {csv_path}")
    _echo(f" - {xlsx_path}")
    return 0


def run_update_scenarios(args: argparse.Namespace) -> int:
    """Run the update-scenarios command."""
    settings = _prepare(args)

    scenarios = DEFAULT_SCENARIOS
    catalog = getattr(args, "scenarios", None)
    if catalog is not None:
        try:
            scenarios = load_scenarios(catalog)
        except ScenarioCatalogError as e:
            return _fail(str(e))

    report = getattr(args, "report", None)
    candidates = [report] if report else scenario_candidates(settings.project_root, settings.artifacts_path)

    try:
        report_path, records = _load(candidates, settings)
    except (ReportNotFound, ReportUnreadable) as e:
        return _fail(str(e))

    outcomes = map_scenarios(aggregate_statuses(records), scenarios)
    output = getattr(args, "output", None) or settings.resolve(settings.checklist_file)
    out_path = write_checklist(outcomes, report_path, output, title=settings.checklist_title)

    passing = sum(1 for o in outcomes if o.ok)
    logger.info("scenarios_updated", passing=passing, total=len(outcomes), path=str(out_path))

    _echo(f"✅ Updated {out_path} ({passing}/{len(outcomes)} scenarios passing)")
    return 0
