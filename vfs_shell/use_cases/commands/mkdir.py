"""
Use case implementing the 'mkdir' command.
"""

import posixpath

from vfs_shell.entities.command_result import CommandResult
from vfs_shell.exceptions import FileSystemError, FileSystemErrorKind
from vfs_shell.use_cases.commands.arguments import parse_flags
from vfs_shell.use_cases.commands.base import BaseShellCommand


class MkdirCommand(BaseShellCommand):
    """Create directories, optionally with their missing parents (-p)."""

    name = "mkdir"
    description = "Create directories"
    usage = "mkdir [-p] directory..."

    def run(self, args: list[str], cwd: str) -> CommandResult:
        parsed = parse_flags(args, "p", self._logger)
        if not parsed.positionals:
            raise self._usage_error("missing operand")

        for dir_path in parsed.positionals:
            self._validate_write(dir_path, cwd)
            absolute_path = self._resolve(dir_path, cwd)
            try:
                if parsed.has("p"):
                    self._make_with_parents(dir_path, absolute_path)
                else:
                    self._make_single(dir_path, absolute_path)
            except FileSystemError as e:
                if e.kind is FileSystemErrorKind.PERMISSION_DENIED:
                    raise self._fail(f"{dir_path}: Permission denied")
                if e.kind is FileSystemErrorKind.ALREADY_EXISTS:
                    raise self._fail(f"cannot create directory '{dir_path}': File exists")
                raise self._fail(f"{dir_path}: {e}")

        return CommandResult.success()

    def _make_single(self, dir_path: str, absolute_path: str) -> None:
        if self._try_stat(absolute_path) is not None:
            raise self._fail(f"cannot create directory '{dir_path}': File exists")

        parent = self._try_stat(posixpath.dirname(absolute_path))
        if parent is None:
            raise self._fail(
                f"cannot create directory '{dir_path}': No such file or directory"
            )
        if not parent.is_dir:
            raise self._fail(f"cannot create directory '{dir_path}': Not a directory")

        self._fs.mkdir(absolute_path)

    def _make_with_parents(self, dir_path: str, absolute_path: str) -> None:
        """
        Create ``absolute_path`` and every missing ancestor.

        Walks upward until an existing node is found, then creates the missing
        nodes top-down. An existing non-directory anywhere in the chain fails
        with "File exists" naming the requested path.
        """
        missing: list[str] = []
        current = absolute_path
        while True:
            stats = self._try_stat(current)
            if stats is not None:
                if not stats.is_dir:
                    raise self._fail(
                        f"cannot create directory '{dir_path}': File exists"
                    )
                break
            missing.append(current)
            parent = posixpath.dirname(current)
            if parent == current:
                break
            current = parent

        for path in reversed(missing):
            self._fs.mkdir(path)
            self._logger.debug(f"Created directory {path}")
