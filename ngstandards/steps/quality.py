"""Lint, format and review tooling."""
from ngstandards.core.pipeline import PipelineContext

ESLINT_AIRBNB_PACKAGES = [
    "eslint-config-airbnb-typescript@^18.0.0",
    "@typescript-eslint/eslint-plugin@^7.0.0",
    "@typescript-eslint/parser@^7.0.0",
]
PRETTIER_PACKAGES = ["prettier", "eslint-config-prettier", "eslint-plugin-prettier"]

# template -> output path parts
LINT_CONFIG_FILES = [
    (".eslintrc.json", (".eslintrc.json",)),
    (".prettierrc.json", (".prettierrc.json",)),
    ("tsconfig.eslint.json", ("tsconfig.eslint.json",)),
    ("vscode-settings.json", (".vscode", "settings.json")),
]


def setup_lint_and_format(ctx: PipelineContext) -> None:
    """Install ESLint (airbnb rules) and Prettier, then copy their configs."""
    ctx.run("npm", "init", "@eslint/config")
    ctx.run("npm", "install", "eslint@^8.56.0")
    ctx.run("npm", "install", *ESLINT_AIRBNB_PACKAGES, "--save-dev")
    ctx.run("npm", "install", *PRETTIER_PACKAGES, "--save-dev")
    ctx.run("ng", "add", "@angular-eslint/schematics")

    for template_name, output in LINT_CONFIG_FILES:
        ctx.render(template_name, *output, variables={})


def setup_pull_request_template(ctx: PipelineContext) -> None:
    ctx.render("pull_request_template.md", ".github", "pull_request_template.md", variables={})


def format_sources(ctx: PipelineContext) -> None:
    ctx.run("npm", "run", "prettier-format")
