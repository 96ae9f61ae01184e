"""Base project scaffolding and Angular CLI config edits."""
from ngstandards.core.logger import get_logger
from ngstandards.core.pipeline import PipelineContext
from ngstandards.scaffold.workspace import add_build_assets, merge_package_scripts

logger = get_logger(__name__)


def scaffold_project(ctx: PipelineContext) -> None:
    """Create the base project with `ng new` (run from the parent directory).

    ``--directory`` pins the workspace folder to the project name; without
    it the Angular CLI dasherizes the name (``MyApp`` -> ``my-app``).
    """
    ctx.runner.run(
        [
            ctx.npx, "@angular/cli", "new", ctx.project_name,
            "--directory", ctx.project_name,
            "--routing", "--style=scss",
        ],
        cwd=ctx.parent_dir,
    )


def update_package_scripts(ctx: PipelineContext) -> None:
    if ctx.runner.mock:
        logger.info(f"MOCK: Would add scripts to {ctx.path('package.json')}")
        return
    merge_package_scripts(ctx.path("package.json"))
    ctx.console.print("[green]Added build, lint and format scripts to package.json[/green]")


def update_build_assets(ctx: PipelineContext) -> None:
    if ctx.runner.mock:
        logger.info(f"MOCK: Would add assets folder to {ctx.path('angular.json')}")
        return
    if add_build_assets(ctx.path("angular.json"), ctx.project_name):
        ctx.console.print("[green]Updated angular.json to include assets folder configuration![/green]")
