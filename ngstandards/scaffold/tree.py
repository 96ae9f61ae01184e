"""Directory tree creation for generated projects."""
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import List, Optional

import yaml

from ngstandards.core.errors import ConfigParseFailure, WriteFailure
from ngstandards.core.logger import get_logger
from ngstandards.scaffold.templates import DEFAULT_TEMPLATE_DIR, write_text

logger = get_logger(__name__)

DECLARATIONS_PLACEHOLDER = "// Declaration file for external scripts"


@dataclass
class FolderSpec:
    """Ordered directories to create under a project root.

    Attributes:
        folders: Relative POSIX paths, created in order
        marker: Empty file written into every ordinary directory
        declarations_path: The one directory seeded with a stub instead
        declarations_file: Stub file name inside declarations_path
        declarations_content: Stub file content
    """

    folders: List[str] = field(default_factory=list)
    marker: str = ".gitkeep"
    declarations_path: str = "src/declarations"
    declarations_file: str = "scripts.d.ts"
    declarations_content: str = DECLARATIONS_PLACEHOLDER

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "FolderSpec":
        """Load a folder specification YAML file.

        Args:
            path: YAML file (defaults to the bundled folders.yml)

        Raises:
            ConfigParseFailure: If the file is missing or malformed
        """
        spec_path = path or DEFAULT_TEMPLATE_DIR / "folders.yml"
        try:
            with open(spec_path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigParseFailure(spec_path, str(e)) from e

        folders = data.get("folders")
        if not isinstance(folders, list) or not all(isinstance(f, str) for f in folders):
            raise ConfigParseFailure(spec_path, "'folders' must be a list of paths")

        declarations = data.get("declarations") or {}
        return cls(
            folders=folders,
            marker=data.get("marker", cls.marker),
            declarations_path=declarations.get("path", cls.declarations_path),
            declarations_file=declarations.get("file", cls.declarations_file),
            declarations_content=declarations.get("content", cls.declarations_content),
        )

    def is_declarations(self, folder: str) -> bool:
        return PurePosixPath(folder) == PurePosixPath(self.declarations_path)


class ProjectTreeBuilder:
    """Creates the folder layout and keeps every directory non-empty."""

    def build(self, root: Path, spec: FolderSpec) -> List[Path]:
        """Create each folder of spec under root.

        Safe to re-run: existing directories and marker files are left as
        they are.

        Returns:
            The created or already present directories, in spec order
        """
        directories = []
        for folder in spec.folders:
            directory = root / PurePosixPath(folder)
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise WriteFailure(directory, e.strerror or str(e)) from e

            if spec.is_declarations(folder):
                self._seed(directory / spec.declarations_file, spec.declarations_content)
            else:
                self._seed(directory / spec.marker, "")
            directories.append(directory)

        logger.debug(f"Ensured {len(directories)} folders under {root}")
        return directories

    def _seed(self, marker: Path, content: str) -> None:
        if marker.exists():
            return
        write_text(marker, content)
