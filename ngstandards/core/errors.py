"""Error types raised while generating a project."""
from pathlib import Path
from typing import List, Optional, Sequence


class ScaffoldError(Exception):
    """Base class for every failure the generator reports."""


class ExternalProcessFailure(ScaffoldError):
    """A delegated tool (ng, npm, npx) exited non-zero or could not start."""

    def __init__(self, command: Sequence[str], returncode: int, reason: Optional[str] = None):
        self.command = list(command)
        self.returncode = returncode
        message = f"Command '{' '.join(self.command)}' exited with code {returncode}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class TemplateNotFound(ScaffoldError):
    """The source template could not be read."""

    def __init__(self, template_name: str, path: Path):
        self.template_name = template_name
        self.path = path
        super().__init__(f"Template '{template_name}' not found at {path}")


class WriteFailure(ScaffoldError):
    """A generated file could not be written."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Failed to write {path}: {reason}")


class MissingTemplateVariable(ScaffoldError):
    """Strict rendering found placeholders with no value."""

    def __init__(self, names: List[str]):
        self.names = names
        super().__init__(f"No value for template placeholder(s): {', '.join(names)}")


class ConfigParseFailure(ScaffoldError):
    """A generated JSON config is missing, unparsable or has an unexpected shape."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Cannot update {path}: {reason}")


class DirectoryRemovalFailure(ScaffoldError):
    """Rollback could not remove the project directory."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Failed to delete project folder {path}: {reason}")


class StepFailed(ScaffoldError):
    """A required pipeline step failed; wraps the original error."""

    def __init__(self, step_name: str, cause: BaseException):
        self.step_name = step_name
        self.cause = cause
        super().__init__(f"Step '{step_name}' failed: {cause}")


class ProjectExistsError(ScaffoldError):
    """The target project directory is already present."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Directory {path} already exists")


class InvalidProjectName(ScaffoldError):
    """The project name cannot be used as a single directory name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid project name: '{name}'")
