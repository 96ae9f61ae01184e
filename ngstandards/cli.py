#!/usr/bin/env python3
"""ngstandards CLI - Angular projects with custom standards and configurations."""
from importlib.metadata import PackageNotFoundError, version
from typing import Optional

import typer
from rich.console import Console

from ngstandards.cli_create_commands import register_create_commands

app = typer.Typer(
    name="ngstandards",
    help="""ngstandards - Create Angular projects with custom standards

Scaffolds an Angular app and wires in CI/CD, Docker, ESLint/Prettier,
a folder layout and i18n in one go.

Quick start:
  ngstandards create my-app     # Answer two questions, get a project
  ngstandards templates         # See the bundled templates
""",
    add_completion=False,
)

console = Console()


def _package_version() -> str:
    try:
        return version("ngstandards")
    except PackageNotFoundError:
        return "0.0.0+unknown"


def _version_callback(value: bool):
    if value:
        console.print(f"ngstandards {_package_version()}")
        raise typer.Exit()


@app.callback()
def main(
    show_version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """CLI to create Angular projects with custom standards and configurations."""


register_create_commands(app, console)

if __name__ == "__main__":
    app()
