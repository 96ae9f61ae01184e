"""Shared test fixtures for ngstandards tests."""
import json
import re
import shutil
from pathlib import Path

import pytest
from rich.console import Console

from ngstandards.core.config import NgStandardsConfig, set_config
from ngstandards.core.errors import ExternalProcessFailure
from ngstandards.core.prompter import CIProvider, Prompter
from ngstandards.core.runner import CommandRunner
from ngstandards.scaffold.templates import DEFAULT_TEMPLATE_DIR

# What `ng new` leaves behind, reduced to the files the steps touch
ANGULAR_SCRIPTS = {
    "ng": "ng",
    "start": "ng serve",
    "build": "ng build",
    "watch": "ng build --watch --configuration development",
    "test": "ng test",
}


class FakePrompter(Prompter):
    """Prompter returning canned answers."""

    def __init__(self, ui_library: bool = False, ci: CIProvider = CIProvider.GITHUB):
        self.ui_library = ui_library
        self.ci = ci
        self.asked = []

    def confirm_ui_library(self) -> bool:
        self.asked.append("ui_library")
        return self.ui_library

    def choose_ci_provider(self) -> CIProvider:
        self.asked.append("ci_provider")
        return self.ci


class FakeAngularRunner(CommandRunner):
    """Records commands; `ng new` writes a minimal Angular workspace.

    Commands whose joined text contains any of fail_on exit with code 1.
    """

    def __init__(self, fail_on=()):
        super().__init__(mock=False)
        self.fail_on = list(fail_on)

    def run(self, cmd, cwd=None):
        command = [str(part) for part in cmd]
        self.history.append(command)

        text = " ".join(command)
        if any(pattern in text for pattern in self.fail_on):
            raise ExternalProcessFailure(command, 1)

        if command[1:3] == ["@angular/cli", "new"]:
            name = command[3]
            directory = option_value(command, "--directory") or dasherize(name)
            write_angular_workspace(Path(cwd) / directory, name)

    def ran(self, *parts):
        """True if a recorded command starts with parts."""
        return any(command[:len(parts)] == list(parts) for command in self.history)


def option_value(command, option):
    if option in command[:-1]:
        return command[command.index(option) + 1]
    return None


def dasherize(name):
    """Workspace folder name the Angular CLI picks when no --directory is given."""
    return re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", name).lower()


def write_angular_workspace(root: Path, name: str) -> None:
    (root / "src" / "app").mkdir(parents=True)
    (root / "package.json").write_text(json.dumps({
        "name": name,
        "version": "0.0.0",
        "scripts": dict(ANGULAR_SCRIPTS),
        "private": True,
    }, indent=2))
    (root / "angular.json").write_text(json.dumps({
        "version": 1,
        "projects": {
            name: {
                "projectType": "application",
                "architect": {
                    "build": {
                        "builder": "@angular-devkit/build-angular:application",
                        "options": {
                            "outputPath": f"dist/{name}",
                            "assets": ["src/favicon.ico"],
                        },
                    },
                },
            },
        },
    }, indent=2))
    (root / "src" / "styles.scss").write_text("/* You can add global styles to this file */\n")
    (root / "src" / "app" / "app.component.ts").write_text("export class AppComponent {}\n")


@pytest.fixture(autouse=True)
def reset_config():
    """Keep the global configuration from leaking between tests."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def config():
    return NgStandardsConfig()


@pytest.fixture
def console():
    """Console that records output for assertions."""
    return Console(record=True, width=200)


@pytest.fixture
def fake_runner():
    return FakeAngularRunner()


@pytest.fixture
def templates_copy(tmp_path):
    """Writable copy of the bundled templates."""
    target = tmp_path / "templates"
    shutil.copytree(DEFAULT_TEMPLATE_DIR, target)
    return target
