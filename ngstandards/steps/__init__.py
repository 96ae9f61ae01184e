"""Project creation steps, in the order they run."""
from typing import List

from ngstandards.core.pipeline import Step
from ngstandards.steps.angular import scaffold_project, update_build_assets, update_package_scripts
from ngstandards.steps.delivery import setup_ci, setup_docker, setup_env_files
from ngstandards.steps.quality import format_sources, setup_lint_and_format, setup_pull_request_template
from ngstandards.steps.structure import create_folder_structure, setup_i18n
from ngstandards.steps.ui_library import setup_ui_library


def build_create_steps() -> List[Step]:
    """Return the default `create` sequence."""
    return [
        Step("scaffold", scaffold_project, "Creating Angular project"),
        Step("package-scripts", update_package_scripts, "Adding package.json scripts"),
        Step("build-assets", update_build_assets, "Configuring angular.json assets"),
        Step("ui-library", setup_ui_library, "Setting up PrimeNG"),
        Step("ci", setup_ci, "Setting up CI/CD"),
        Step("docker", setup_docker, "Setting up Docker and NGINX"),
        Step("environment", setup_env_files, "Adding environment files"),
        Step("lint-format", setup_lint_and_format, "Setting up ESLint, Prettier and Airbnb rules"),
        Step("pull-request-template", setup_pull_request_template, "Adding pull request template"),
        Step("folder-structure", create_folder_structure, "Creating project folder structure"),
        Step("i18n", setup_i18n, "Setting up i18n (internationalization) support"),
        Step("format", format_sources, "Formatting sources with Prettier"),
    ]


__all__ = ["build_create_steps"]
