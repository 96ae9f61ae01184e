"""Rollback of partially generated projects."""
import shutil
from pathlib import Path
from typing import Optional

from rich.console import Console

from ngstandards.core.errors import DirectoryRemovalFailure
from ngstandards.core.logger import get_logger

logger = get_logger(__name__)


class RecoveryManager:
    """Deletes the project directory when creation fails.

    Rollback covers exactly the project directory. Files a step may have
    written elsewhere are not tracked and stay in place.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def rollback(self, project_root: Path) -> bool:
        """Recursively remove project_root.

        A missing directory counts as success. Removal errors are reported,
        never raised.

        Args:
            project_root: Directory created for the new project

        Returns:
            True if the directory no longer exists
        """
        if not project_root.exists():
            logger.debug(f"Nothing to roll back, {project_root} does not exist")
            return True

        try:
            shutil.rmtree(project_root)
        except OSError as e:
            failure = DirectoryRemovalFailure(project_root, e.strerror or str(e))
            logger.error(str(failure))
            self.console.print(f"\n[red]{failure}[/red]\n")
            return False

        logger.info(f"Rolled back {project_root}")
        self.console.print(f"\n[yellow]Deleted incomplete project folder: {project_root.name}[/yellow]\n")
        return True
