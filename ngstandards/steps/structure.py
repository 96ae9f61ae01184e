"""Source folder layout and internationalisation."""
import json
from typing import Dict

from ngstandards.core.pipeline import PipelineContext
from ngstandards.scaffold.templates import to_title_case, write_text
from ngstandards.scaffold.tree import FolderSpec, ProjectTreeBuilder

I18N_PACKAGES = ["@ngx-translate/core", "@ngx-translate/http-loader"]
DEFAULT_LOCALE = "en"

# Application files rewritten to register the translation module
I18N_APP_FILES = [
    ("app.component.ts", ("src", "app", "app.component.ts")),
    ("app.component.html", ("src", "app", "app.component.html")),
    ("app.config.ts", ("src", "app", "app.config.ts")),
]


def create_folder_structure(ctx: PipelineContext) -> None:
    spec = FolderSpec.load(ctx.engine.template_path("folders.yml"))
    ProjectTreeBuilder().build(ctx.project_root, spec)
    ctx.console.print("[green]Folders created successfully![/green]")
    ctx.render("FOLDER_STRUCTURE.md", "FOLDER_STRUCTURE.md", variables={})


def locale_resource(project_name: str) -> Dict[str, Dict[str, str]]:
    """Default locale strings seeded into en.json."""
    return {
        "COMMON": {
            "BRAND_NAME": to_title_case(project_name),
            "HELLO": "Hello",
        }
    }


def setup_i18n(ctx: PipelineContext) -> None:
    """Install ngx-translate, add its loader and the default locale file."""
    ctx.run("npm", "install", *I18N_PACKAGES)

    ctx.render("loader.ts", "src", "assets", "i18n", "loader.ts", variables={})
    write_text(
        ctx.path("src", "assets", "i18n", f"{DEFAULT_LOCALE}.json"),
        json.dumps(locale_resource(ctx.project_name), indent=2, ensure_ascii=False) + "\n",
    )

    for template_name, output in I18N_APP_FILES:
        ctx.render(template_name, *output)
