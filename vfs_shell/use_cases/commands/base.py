"""
Shared plumbing for the shell command use cases.
"""

import logging
import posixpath
from abc import abstractmethod
from typing import Optional, Sequence

from vfs_shell.entities.command_result import CommandResult
from vfs_shell.entities.file_stat import FileStat
from vfs_shell.exceptions import (
    CommandError,
    FileSystemError,
    FileSystemErrorKind,
    SecurityError,
    UsageError,
)
from vfs_shell.ports.commands.shell_command_port import ShellCommandPort
from vfs_shell.ports.files.file_system_port import FileSystemPort
from vfs_shell.utils.path_security import resolve_path, validate_write_path

_ABSENT = (FileSystemErrorKind.NOT_FOUND, FileSystemErrorKind.NOT_A_DIRECTORY)


class BaseShellCommand(ShellCommandPort):
    """
    Base class for commands operating on a FileSystemPort.

    Subclasses implement ``run`` and signal failures by raising CommandError
    (or letting SecurityError / FileSystemError escape); ``execute`` turns every
    failure into an error CommandResult so callers never see an exception.
    """

    failure_exit_code = 1

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the command.

        Args:
            file_system: Virtual file system capability
            logger: Logger instance to use for logging
        """
        self._fs = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self, args: Sequence[str], cwd: str, stdin: Optional[str] = None
    ) -> CommandResult:
        args = list(args)
        self._logger.info(f"Executing {self.name} in {cwd}: {args}")
        try:
            return self.run(args, cwd)
        except CommandError as e:
            self._logger.warning(f"{self.name} failed: {e}")
            return CommandResult.error(str(e), e.exit_code)
        except SecurityError as e:
            self._logger.warning(f"{self.name} denied: {e}")
            return CommandResult.error(str(e), self.failure_exit_code)
        except FileSystemError as e:
            self._logger.warning(f"{self.name} failed: {e!r}")
            return CommandResult.error(f"{self.name}: {e}", self.failure_exit_code)
        except Exception as e:
            self._logger.exception(f"Unexpected error in {self.name}")
            return CommandResult.error(f"{self.name}: {e}", self.failure_exit_code)

    @abstractmethod
    def run(self, args: list[str], cwd: str) -> CommandResult:
        """Command body; may raise CommandError, SecurityError or FileSystemError."""
        pass

    # ------------------------- helpers -------------------------
    def _usage_error(self, problem: str) -> UsageError:
        return UsageError(
            f"{self.name}: {problem}\nUsage: {self.usage}", self.failure_exit_code
        )

    def _fail(self, message: str) -> CommandError:
        return CommandError(f"{self.name}: {message}", self.failure_exit_code)

    def _validate_write(self, path: str, cwd: str) -> None:
        validate_write_path(path, self.name, cwd)

    def _resolve(self, path: str, cwd: str) -> str:
        return resolve_path(path, cwd)

    def _try_stat(self, path: str) -> Optional[FileStat]:
        """Stat ``path``, returning None when nothing exists there."""
        try:
            return self._fs.stat(path)
        except FileSystemError as e:
            if e.kind in _ABSENT:
                return None
            raise

    def _ensure_parent(self, path: str) -> None:
        """Create the parent directory of ``path`` when it is missing."""
        parent = posixpath.dirname(path)
        if self._try_stat(parent) is None:
            self._logger.debug(f"Creating missing parent directory {parent}")
            self._fs.mkdir(parent, recursive=True)


def target_basename(path: str) -> str:
    """Final component of a user supplied path, ignoring trailing separators."""
    return posixpath.basename(path.rstrip("/")) or path
