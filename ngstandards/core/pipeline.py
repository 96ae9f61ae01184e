"""Ordered step execution for project creation."""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

from rich.console import Console

from ngstandards.core.errors import StepFailed
from ngstandards.core.logger import get_logger
from ngstandards.core.prompter import Prompter
from ngstandards.core.runner import CommandRunner
from ngstandards.scaffold.templates import TemplateEngine, project_variables

logger = get_logger(__name__)


@dataclass
class PipelineContext:
    """Everything a step needs, passed explicitly to each step.

    Steps address files through ``path()`` and run tools through ``run()``
    so the process working directory is never changed.
    """

    project_name: str
    parent_dir: Path
    engine: TemplateEngine
    runner: CommandRunner
    prompter: Prompter
    console: Console
    npx: str = "npx"
    answers: Dict[str, Any] = field(default_factory=dict)

    @property
    def project_root(self) -> Path:
        return self.parent_dir / self.project_name

    @property
    def variables(self) -> Dict[str, str]:
        return project_variables(self.project_name)

    def path(self, *parts: str) -> Path:
        return self.project_root.joinpath(*parts)

    def run(self, *cmd: str) -> None:
        """Run a command inside the project root."""
        self.runner.run(list(cmd), cwd=self.project_root)

    def render(self, template_name: str, *output: str, variables: Optional[Dict[str, str]] = None) -> Path:
        """Render a template into the project.

        Uses the project variables unless variables is given.
        """
        return self.engine.render_to_file(
            template_name,
            self.path(*output),
            self.variables if variables is None else variables,
        )


@dataclass
class Step:
    """A named unit of the creation pipeline.

    Attributes:
        name: Short identifier shown in status output
        action: Callable receiving the PipelineContext
        description: Human readable status line
        required: A failing required step aborts the run
    """

    name: str
    action: Callable[[PipelineContext], None]
    description: str = ""
    required: bool = True

    @property
    def label(self) -> str:
        return self.description or self.name


class StepOrchestrator:
    """Runs steps one after another and stops at the first required failure."""

    def __init__(self, steps: Sequence[Step], console: Optional[Console] = None):
        self.steps = list(steps)
        self.console = console or Console()
        self.current: Optional[str] = None

    def run(self, ctx: PipelineContext) -> List[str]:
        """Execute every step in order.

        Returns:
            Names of the steps that completed

        Raises:
            StepFailed: When a required step raises; later steps never run
        """
        completed: List[str] = []

        for index, step in enumerate(self.steps, start=1):
            self.current = step.name
            self.console.print(f"\n[blue]({index}/{len(self.steps)}) {step.label}...[/blue]")
            logger.debug(f"Starting step '{step.name}'")
            try:
                step.action(ctx)
            except Exception as e:
                if step.required:
                    logger.debug(f"Step '{step.name}' failed: {e}")
                    raise StepFailed(step.name, e) from e
                logger.warning(f"Optional step '{step.name}' failed, continuing: {e}")
                continue

            completed.append(step.name)
            self.console.print(f"[green]✓[/green] {step.label} done")

        self.current = None
        return completed
