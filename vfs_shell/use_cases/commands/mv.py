"""
Use case implementing the 'mv' command.
"""

import posixpath

from vfs_shell.entities.command_result import CommandResult
from vfs_shell.exceptions import FileSystemError, FileSystemErrorKind
from vfs_shell.use_cases.commands.base import BaseShellCommand, target_basename


class MvCommand(BaseShellCommand):
    """
    Move or rename files and directories.

    Sources are write-validated as well as the destination, since moving
    deletes them. An existing target is never overwritten.
    """

    name = "mv"
    description = "Move/rename files and directories"
    usage = "mv source... destination"

    def run(self, args: list[str], cwd: str) -> CommandResult:
        if len(args) < 2:
            raise self._usage_error("missing file operand")

        sources, destination = args[:-1], args[-1]

        for path in [*sources, destination]:
            self._validate_write(path, cwd)

        dest_path = self._resolve(destination, cwd)
        dest_stats = self._try_stat(dest_path)
        dest_is_dir = dest_stats is not None and dest_stats.is_dir

        if len(sources) > 1 and not dest_is_dir:
            raise self._fail(f"target '{destination}' is not a directory")

        for source in sources:
            source_path = self._resolve(source, cwd)
            if dest_is_dir:
                target_path = posixpath.join(dest_path, target_basename(source))
            else:
                target_path = dest_path
            try:
                self._move(source, source_path, target_path, destination)
            except FileSystemError as e:
                if e.is_not_found:
                    raise self._fail(f"cannot stat '{source}': No such file or directory")
                if e.kind is FileSystemErrorKind.PERMISSION_DENIED:
                    raise self._fail(f"cannot move '{source}': Permission denied")
                raise self._fail(f"cannot move '{source}': {e}")

        return CommandResult.success()

    def _move(
        self, source: str, source_path: str, target_path: str, destination: str
    ) -> None:
        source_stats = self._fs.stat(source_path)

        if self._try_stat(target_path) is not None:
            raise self._fail(f"cannot move '{source}' to '{destination}': File exists")

        normalized_source = posixpath.normpath(source_path)
        if source_stats.is_dir and posixpath.normpath(target_path).startswith(
            normalized_source.rstrip("/") + "/"
        ):
            raise self._fail(
                f"cannot move '{source}' to a subdirectory of itself, '{destination}'"
            )

        self._ensure_parent(target_path)
        self._fs.rename(source_path, target_path)
        self._logger.debug(f"Renamed {source_path} to {target_path}")
