"""Optional PrimeNG setup."""
from ngstandards.core.pipeline import PipelineContext

PRIMENG_PACKAGES = ["primeng", "primeflex", "primeicons"]


def setup_ui_library(ctx: PipelineContext) -> None:
    """Ask for PrimeNG; when accepted install it and import its styles."""
    accepted = ctx.prompter.confirm_ui_library()
    ctx.answers["ui_library"] = accepted
    if not accepted:
        ctx.console.print("[dim]Skipping PrimeNG[/dim]")
        return

    ctx.console.print("[blue]Installing PrimeNG...[/blue]")
    ctx.run("npm", "install", *PRIMENG_PACKAGES)
    ctx.engine.append_to_file("primeng-styles.scss", ctx.path("src", "styles.scss"), ctx.variables)
    ctx.console.print("[green]PrimeNG styles added to styles.scss![/green]")
