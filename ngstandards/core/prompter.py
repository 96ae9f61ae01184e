"""Interactive questions asked while a project is being created."""
from enum import Enum

import click
import typer


class CIProvider(str, Enum):
    """CI providers with bundled workflow templates."""

    GITHUB = "GitHub"
    GITLAB = "GitLab"


class Prompter:
    """Asks the two decisions the creation pipeline branches on.

    Both questions block until answered. Answers only steer which steps
    do work; they are never passed to templates.
    """

    def confirm_ui_library(self) -> bool:
        return typer.confirm("Would you like to install PrimeNG?", default=True)

    def choose_ci_provider(self) -> CIProvider:
        choices = [provider.value for provider in CIProvider]
        answer = typer.prompt(
            "Which CI/CD setup would you like?",
            type=click.Choice(choices, case_sensitive=False),
        )
        # click.Choice hands back the canonical spelling
        return CIProvider(answer)
