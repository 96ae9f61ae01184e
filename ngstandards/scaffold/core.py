"""Project creation with rollback on failure."""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from ngstandards.core.config import NgStandardsConfig, get_config
from ngstandards.core.errors import InvalidProjectName, ProjectExistsError, StepFailed
from ngstandards.core.logger import get_logger
from ngstandards.core.pipeline import PipelineContext, Step, StepOrchestrator
from ngstandards.core.prompter import Prompter
from ngstandards.core.recovery import RecoveryManager
from ngstandards.core.runner import CommandRunner
from ngstandards.scaffold.templates import TemplateEngine

logger = get_logger(__name__)


@dataclass
class CreationResult:
    """Outcome of a create run."""

    project_root: Path
    success: bool
    completed_steps: List[str] = field(default_factory=list)
    failed_step: Optional[str] = None
    error: Optional[str] = None
    rolled_back: bool = False
    interrupted: bool = False


class ProjectCreator:
    """Creates an Angular project by running the step sequence.

    Any failure in any step stops the run, removes the project directory
    and is reported once here.
    """

    def __init__(
        self,
        steps: Optional[Sequence[Step]] = None,
        config: Optional[NgStandardsConfig] = None,
        console: Optional[Console] = None,
        prompter: Optional[Prompter] = None,
        runner: Optional[CommandRunner] = None,
        engine: Optional[TemplateEngine] = None,
    ):
        self.config = config or get_config()
        self.console = console or Console()
        if steps is None:
            from ngstandards.steps import build_create_steps
            steps = build_create_steps()
        self.steps = list(steps)
        self.prompter = prompter or Prompter()
        self.runner = runner or CommandRunner(mock=self.config.mock)
        self.engine = engine or TemplateEngine(
            self.config.templates_dir, strict=self.config.strict_placeholders
        )
        self.recovery = RecoveryManager(self.console)

    def create(self, project_name: str, output_dir: Optional[Path] = None) -> CreationResult:
        """Create project_name under output_dir (defaults to current dir).

        Args:
            project_name: Name passed to `ng new`, also the directory name
            output_dir: Parent directory of the new project

        Returns:
            CreationResult describing success or the failure and rollback

        Raises:
            InvalidProjectName: If the name is not a single directory name
            ProjectExistsError: If the project directory already exists
        """
        validate_project_name(project_name)
        parent_dir = (output_dir or Path.cwd()).resolve()
        ctx = PipelineContext(
            project_name=project_name,
            parent_dir=parent_dir,
            engine=self.engine,
            runner=self.runner,
            prompter=self.prompter,
            console=self.console,
            npx=self.config.npx,
        )
        if ctx.project_root.exists():
            raise ProjectExistsError(ctx.project_root)

        self.console.print(f"\n[green]Creating Angular project: {project_name}...[/green]\n")
        logger.debug(f"Creating {ctx.project_root} with {len(self.steps)} steps")
        orchestrator = StepOrchestrator(self.steps, self.console)

        try:
            completed = orchestrator.run(ctx)
        except (Exception, KeyboardInterrupt) as e:
            return self._fail(ctx, e, orchestrator.current)

        self.console.print(
            f"\n[green]Project {project_name} created successfully with all configurations![/green]\n"
        )
        return CreationResult(project_root=ctx.project_root, success=True, completed_steps=completed)

    def _fail(self, ctx: PipelineContext, error: BaseException, failed_step: Optional[str]) -> CreationResult:
        cause = error.cause if isinstance(error, StepFailed) else error
        interrupted = isinstance(cause, KeyboardInterrupt)
        reason = "interrupted by user" if interrupted else str(cause)

        logger.debug(f"Failed to create {ctx.project_name} at step '{failed_step}': {reason}")
        self.console.print(
            f"\n[red]Failed to create Angular project {ctx.project_name}: {escape(reason)}[/red]\n"
        )

        rolled_back = self.recovery.rollback(ctx.project_root)
        return CreationResult(
            project_root=ctx.project_root,
            success=False,
            failed_step=failed_step,
            error=reason,
            rolled_back=rolled_back,
            interrupted=interrupted,
        )


def validate_project_name(project_name: str) -> None:
    """Reject names that are not a single path component."""
    name = project_name.strip()
    if not name or name in {".", ".."} or name != project_name:
        raise InvalidProjectName(project_name)
    if "/" in name or "\\" in name:
        raise InvalidProjectName(project_name)
