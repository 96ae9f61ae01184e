"""External process execution for generator steps."""
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from ngstandards.core.errors import ExternalProcessFailure
from ngstandards.core.logger import get_logger

logger = get_logger(__name__)


class CommandRunner:
    """Runs delegated tools (ng, npm, npx) with inherited standard streams.

    Output is never captured so interactive tools such as
    ``npm init @eslint/config`` can talk to the user directly.
    """

    def __init__(self, mock: bool = False):
        self.mock = mock
        self.history: List[List[str]] = []

    def run(self, cmd: Sequence[str], cwd: Optional[Path] = None) -> None:
        """Run a command and wait for it to exit.

        Args:
            cmd: Argument vector, e.g. ['npm', 'install', 'primeng']
            cwd: Working directory for the child process

        Raises:
            ExternalProcessFailure: If the command exits non-zero or the
                executable cannot be found
        """
        command = [str(part) for part in cmd]
        self.history.append(command)

        if self.mock:
            logger.info(f"MOCK: Would run {' '.join(command)}")
            return

        logger.debug(f"Running {' '.join(command)} in {cwd or Path.cwd()}")

        try:
            result = subprocess.run(command, cwd=str(cwd) if cwd else None, check=False)
        except FileNotFoundError:
            raise ExternalProcessFailure(command, 127, reason=f"{command[0]} not found in PATH")
        except OSError as e:
            raise ExternalProcessFailure(command, 126, reason=str(e))

        if result.returncode != 0:
            raise ExternalProcessFailure(command, result.returncode)
