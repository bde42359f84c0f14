"""
Use case implementing the 'touch' command.
"""

import posixpath

from vfs_shell.entities.command_result import CommandResult
from vfs_shell.exceptions import FileSystemError, FileSystemErrorKind
from vfs_shell.use_cases.commands.base import BaseShellCommand


class TouchCommand(BaseShellCommand):
    """Create empty files.

    Touching an existing file is a no-op: the file system capability keeps no
    timestamps to update.
    """

    name = "touch"
    description = "Create empty files or update timestamps"
    usage = "touch file..."

    def run(self, args: list[str], cwd: str) -> CommandResult:
        if not args:
            raise self._usage_error("missing file operand")

        for file_path in args:
            self._validate_write(file_path, cwd)
            absolute_path = self._resolve(file_path, cwd)
            try:
                self._touch(file_path, absolute_path)
            except FileSystemError as e:
                if e.kind is FileSystemErrorKind.PERMISSION_DENIED:
                    raise self._fail(f"{file_path}: Permission denied")
                raise self._fail(f"{file_path}: {e}")

        return CommandResult.success()

    def _touch(self, file_path: str, absolute_path: str) -> None:
        try:
            stats = self._fs.stat(absolute_path)
        except FileSystemError as e:
            if not e.is_not_found:
                raise
        else:
            if stats.is_dir:
                raise self._fail(f"{file_path}: Is a directory")
            return

        parent = self._try_stat(posixpath.dirname(absolute_path))
        if parent is None:
            raise self._fail(f"cannot touch '{file_path}': No such file or directory")
        if not parent.is_dir:
            raise self._fail(f"cannot touch '{file_path}': Not a directory")

        self._fs.write_file(absolute_path, b"")
        self._logger.debug(f"Created empty file {absolute_path}")
