"""Rich table builders used by the CLI.

Kept separate to keep the command module focused on wiring.
"""

from __future__ import annotations

from rich.table import Table


def build_loads_table(loads) -> Table:
    """Build the model-load listing table for `smartci loads`."""
    table = Table(show_header=True, title="Model Loads")
    table.add_column("#", justify="right")
    table.add_column("Variable", style="cyan")
    table.add_column("Logical Path")
    table.add_column("Lookup Path")
    for index, load in enumerate(loads, start=1):
        table.add_row(str(index), f"${load.model_name}", load.raw_path, load.convention_path)
    return table


def build_roots_table(discovery) -> Table:
    """Build the application directory table for `smartci roots`."""
    title = "Application Directories"
    if discovery.used_defaults:
        title += " (defaults)"
    table = Table(show_header=True, title=title)
    table.add_column("Priority", justify="right")
    table.add_column("Directory", style="cyan")
    table.add_column("Exists")
    for priority, app_dir in enumerate(discovery.app_dirs, start=1):
        exists = (discovery.project_root / app_dir).is_dir()
        table.add_row(
            str(priority),
            app_dir,
            "[green]yes[/green]" if exists else "[red]no[/red]",
        )
    return table
