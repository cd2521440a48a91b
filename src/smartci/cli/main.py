"""SmartCI CLI - CodeIgniter 3 model navigation.

This module provides the command-line interface for SmartCI, exposing the
definition and hover lookups plus a few inspection commands.
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markdown import Markdown

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="smartci",
    help="Go-to-definition and hover for CodeIgniter 3 model calls",
    no_args_is_help=True,
)

# Rich console for formatted output
console = Console()
err_console = Console(stderr=True)

# Global verbose flag
_verbose: bool = False

WorkspaceOption = Annotated[
    Optional[Path],
    typer.Option(
        "--workspace",
        "-w",
        help="Workspace root (defaults to the current directory)",
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
    ),
]
FileArgument = Annotated[
    Path,
    typer.Argument(help="PHP file containing the cursor", dir_okay=False, resolve_path=True),
]
LineArgument = Annotated[int, typer.Argument(help="Cursor line (1-based)", min=1)]
ColumnArgument = Annotated[int, typer.Argument(help="Cursor column (1-based)", min=1)]


def set_verbose(verbose: bool) -> None:
    """Set global verbose mode."""
    global _verbose
    _verbose = verbose


def print_exception(e: Exception) -> None:
    """Print exception details in verbose mode."""
    if _verbose:
        err_console.print("\n[dim]--- Traceback (verbose mode) ---[/dim]")
        err_console.print(f"[dim]{traceback.format_exc()}[/dim]")


def configure_logging(verbose: bool) -> None:
    from smartci.core.config import get_config

    level = logging.DEBUG if verbose else getattr(logging, get_config().log_level)
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output with full tracebacks"),
    ] = False,
) -> None:
    """SmartCI CLI - CodeIgniter 3 model navigation."""
    set_verbose(verbose)
    configure_logging(verbose)


def get_client(workspace: Path | None):
    """Build a client bound to `workspace` (or the current directory)."""
    from smartci.client import SmartCIClient

    return SmartCIClient([workspace or Path.cwd()])


def load_document(client, file: Path):
    """Open `file`, exiting with an error message when it cannot be read."""
    from smartci.core.document import DocumentLoadError

    try:
        return client.open_document(file)
    except DocumentLoadError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        print_exception(e)
        raise typer.Exit(1)


def to_position(line: int, column: int):
    """Convert a 1-based CLI position to a zero-based Position."""
    from smartci.core.models import Position

    return Position(line=line - 1, character=column - 1)


@app.command()
def definition(
    file: FileArgument,
    line: LineArgument,
    column: ColumnArgument,
    workspace: WorkspaceOption = None,
) -> None:
    """Print the definition of the model method called at a position.

    Example:
        smartci definition application/controllers/Home.php 12 30
    """
    client = get_client(workspace)
    document = load_document(client, file)

    location = client.definition(document, to_position(line, column))
    if location is None:
        err_console.print("[yellow]No model method found at this position[/yellow]")
        raise typer.Exit(1)

    target = f"{location.path}:{location.line + 1}:{location.character + 1}"
    console.print(target, highlight=False, soft_wrap=True)


@app.command()
def hover(
    file: FileArgument,
    line: LineArgument,
    column: ColumnArgument,
    workspace: WorkspaceOption = None,
    raw: Annotated[
        bool,
        typer.Option("--raw", help="Print the markdown source instead of rendering it"),
    ] = False,
) -> None:
    """Show the signature and documentation of the model method at a position.

    Example:
        smartci hover application/controllers/Home.php 12 30 --raw
    """
    client = get_client(workspace)
    document = load_document(client, file)

    content = client.hover(document, to_position(line, column))
    if content is None:
        err_console.print("[yellow]No model method found at this position[/yellow]")
        raise typer.Exit(1)

    markdown = content.to_markdown()
    if raw:
        console.print(markdown, markup=False, highlight=False, soft_wrap=True, end="")
    else:
        console.print(Markdown(markdown))


@app.command()
def loads(
    file: Annotated[
        Path,
        typer.Argument(help="PHP file to inspect", dir_okay=False, resolve_path=True),
    ],
) -> None:
    """List the load->model statements of a file.

    Example:
        smartci loads application/controllers/Home.php
    """
    from smartci.cli._tables import build_loads_table

    client = get_client(None)
    document = load_document(client, file)

    references = client.parse_loads(document)
    if not references:
        console.print("[yellow]No model loads found[/yellow]")
        return

    console.print(build_loads_table(references))


@app.command()
def roots(workspace: WorkspaceOption = None) -> None:
    """Show the project root and the application directories searched for models.

    Example:
        smartci roots -w /path/to/workspace
    """
    from smartci.cli._tables import build_roots_table

    client = get_client(workspace)
    discovery = client.discover_roots()

    console.print(f"Project root: [cyan]{discovery.project_root}[/cyan]", soft_wrap=True)
    console.print(build_roots_table(discovery))


@app.command()
def locate(
    model_path: Annotated[str, typer.Argument(help="Logical model path, e.g. common/user_model")],
    workspace: WorkspaceOption = None,
) -> None:
    """Resolve a logical model path to its file.

    Example:
        smartci locate common/Ebei_model
    """
    client = get_client(workspace)

    model_file = client.find_model_file(model_path)
    if model_file is None:
        err_console.print(f"[yellow]No model file found for[/yellow] {model_path}")
        raise typer.Exit(1)

    console.print(str(model_file), highlight=False, soft_wrap=True)


@app.command()
def serve(
    host: Annotated[
        str,
        typer.Option("--host", help="Bind host for the HTTP API"),
    ] = "127.0.0.1",
    port: Annotated[
        int,
        typer.Option("--port", help="Bind port for the HTTP API"),
    ] = 8000,
    reload: Annotated[
        bool,
        typer.Option("--reload", help="Auto-reload on code changes (dev only)"),
    ] = False,
) -> None:
    """Run the SmartCI HTTP API server (optional dependency).

    Requires the `api` extra (FastAPI + Uvicorn).
    """
    try:
        import uvicorn  # type: ignore[import-not-found]
    except ImportError as e:
        err_console.print(
            "[red]Error:[/red] HTTP API dependencies are not installed.\n"
            "[yellow]Hint:[/yellow] Install with: pip install 'smartci[api]'"
        )
        print_exception(e)
        raise typer.Exit(1)

    uvicorn.run(
        "smartci.api.app:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )


if __name__ == "__main__":
    app()
