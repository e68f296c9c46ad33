"""CLI package for smokereport."""

from smokereport.cli.app import app, main
from smokereport.cli.commands import run_export_results, run_update_scenarios

__all__ = [
    "app",
    "main",
    "run_export_results",
    "run_update_scenarios",
]
