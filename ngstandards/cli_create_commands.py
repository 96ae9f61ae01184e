"""Project CLI commands - create, templates."""
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ngstandards.core.config import get_config
from ngstandards.core.errors import ScaffoldError
from ngstandards.scaffold.templates import TemplateEngine

# Module-level console instance (will be set by register function)
console: Console = Console()

EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def create(
    project_name: str = typer.Argument(..., help="Name of the Angular project to create"),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Parent directory (defaults to current directory)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file"),
):
    """Create a new Angular project with custom standards.

    Runs `ng new`, then adds scripts, CI/CD, Docker, environment files,
    ESLint/Prettier, a pull request template, the folder layout and i18n.
    On any failure the project folder is deleted.

    Examples:
        ngstandards create demo-app
        ngstandards create demo-app -o ~/work --verbose
    """
    from ngstandards.cli_support import handle_cli_error, print_info, setup_file_logging
    from ngstandards.scaffold.core import ProjectCreator

    config = get_config()
    log_file = log_file or config.log_file
    if verbose or log_file:
        setup_file_logging(log_file=log_file, verbose=verbose)
    if config.mock:
        print_info(console, "Mock mode: external commands are logged, not run")

    try:
        result = ProjectCreator(config=config, console=console).create(project_name, output_dir)
    except ScaffoldError as e:
        handle_cli_error(e, console, verbose=verbose)

    if result.interrupted:
        raise typer.Exit(EXIT_INTERRUPTED)
    if not result.success:
        raise typer.Exit(EXIT_FAILURE)


def templates():
    """List the bundled template files."""
    config = get_config()
    engine = TemplateEngine(config.templates_dir)
    console.print(f"[cyan]Templates in {engine.template_dir}:[/cyan]\n")
    for name in engine.list_templates():
        console.print(f"  {name}")


def register_create_commands(app: typer.Typer, shared_console: Console):
    """Register project commands with the main Typer app.

    Args:
        app: Main Typer application
        shared_console: Shared Rich console instance
    """
    global console
    console = shared_console

    app.command()(create)
    app.command()(templates)
