"""CI/CD, Docker and environment file setup."""
from ngstandards.core.pipeline import PipelineContext
from ngstandards.core.prompter import CIProvider


def setup_ci(ctx: PipelineContext) -> None:
    """Ask for the CI provider and render its workflow files.

    GitHub gets a CI and a CD workflow, GitLab a single pipeline file.
    """
    provider = ctx.prompter.choose_ci_provider()
    ctx.answers["ci_provider"] = provider

    ctx.console.print(f"[blue]Setting up {provider.value.upper()} CI/CD...[/blue]")
    if provider is CIProvider.GITHUB:
        ctx.render("github-ci.yml", ".github", "workflows", "ci.yml")
        ctx.render("github-cd.yml", ".github", "workflows", "cd.yml")
    else:
        ctx.render("gitlab-ci.yml", ".gitlab-ci.yml")
    ctx.console.print(f"[green]{provider.value.upper()} CI/CD configuration added![/green]")


def setup_docker(ctx: PipelineContext) -> None:
    ctx.render("Dockerfile", "Dockerfile")
    ctx.render("docker-compose.yml", "docker-compose.yml")
    ctx.render("nginx.conf", "nginx.conf")
    ctx.render(".dockerignore", ".dockerignore", variables={})


def setup_env_files(ctx: PipelineContext) -> None:
    """Write .env/.env.example and generate Angular environment files."""
    ctx.render(".env.example", ".env.example")
    ctx.render(".env.example", ".env")
    ctx.run("ng", "generate", "environments")
