"""Template engine for project scaffolding.

Templates are plain text files containing ``{{identifier}}`` placeholders.
Only two braces, word characters and two braces form a placeholder, so
GitHub expressions like ``${{ secrets.GITHUB_TOKEN }}`` and Angular
bindings like ``{{ 'COMMON.HELLO' | translate }}`` pass through untouched.
"""
import re
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from ngstandards.core.errors import MissingTemplateVariable, TemplateNotFound, WriteFailure
from ngstandards.core.logger import get_logger

logger = get_logger(__name__)

PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")

DEFAULT_TEMPLATE_DIR = Path(__file__).parent.parent / "templates"


class TemplateEngine:
    """Handles template rendering for scaffolding."""

    def __init__(self, template_dir: Optional[Path] = None, strict: bool = False):
        self.template_dir = Path(template_dir) if template_dir else DEFAULT_TEMPLATE_DIR
        self.strict = strict

    def template_path(self, template_name: str) -> Path:
        return self.template_dir / template_name

    def load(self, template_name: str) -> str:
        """Read a template's text.

        Raises:
            TemplateNotFound: If the template cannot be read
        """
        path = self.template_path(template_name)
        try:
            with open(path, encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Cannot read template {path}: {e}")
            raise TemplateNotFound(template_name, path) from e

    def render_string(self, text: str, variables: Mapping[str, str]) -> str:
        """Substitute every ``{{key}}`` in text.

        In lenient mode a key missing from variables renders as an empty
        string. In strict mode missing keys raise MissingTemplateVariable.
        """
        if self.strict:
            missing = sorted({key for key in PLACEHOLDER.findall(text) if key not in variables})
            if missing:
                raise MissingTemplateVariable(missing)

        return PLACEHOLDER.sub(lambda match: str(variables.get(match.group(1), "")), text)

    def render(self, template_name: str, variables: Mapping[str, str]) -> str:
        """Render a named template with given variables."""
        return self.render_string(self.load(template_name), variables)

    def render_to_file(
        self,
        template_name: str,
        output_path: Path,
        variables: Optional[Mapping[str, str]] = None,
    ) -> Path:
        """Render a template and write the result to output_path.

        Parent directories are created; an existing file is overwritten.

        Args:
            template_name: Template file name relative to the template directory
            output_path: Destination file
            variables: Placeholder values (empty mapping if omitted)

        Returns:
            The written path
        """
        content = self.render(template_name, variables or {})
        write_text(Path(output_path), content)
        logger.debug(f"Rendered {template_name} -> {output_path}")
        return Path(output_path)

    def append_to_file(
        self,
        template_name: str,
        output_path: Path,
        variables: Optional[Mapping[str, str]] = None,
    ) -> Path:
        """Render a template and append it to output_path."""
        content = self.render(template_name, variables or {})
        write_text(Path(output_path), content, append=True)
        logger.debug(f"Appended {template_name} -> {output_path}")
        return Path(output_path)

    def list_templates(self) -> List[str]:
        """List template files relative to the template directory."""
        if not self.template_dir.exists():
            return []
        return sorted(
            str(p.relative_to(self.template_dir))
            for p in self.template_dir.rglob("*")
            if p.is_file() and p.suffix != ".py" and "__pycache__" not in p.parts
        )


def write_text(path: Path, content: str, append: bool = False) -> None:
    """Write content to path, creating parent directories first.

    Raises:
        WriteFailure: On any OS error (permissions, disk full, ...)
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "a" if append else "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        raise WriteFailure(path, e.strerror or str(e)) from e


def to_title_case(name: str) -> str:
    """Turn a project name into a display title ('my-cool-app' -> 'My Cool App')."""
    return re.sub(
        r"\w\S*",
        lambda match: match.group(0)[0].upper() + match.group(0)[1:].lower(),
        name.replace("-", " "),
    )


def project_variables(project_name: str) -> Dict[str, str]:
    """Template variables shared by every step."""
    return {
        "projectName": project_name,
        "projectTitle": to_title_case(project_name),
    }
