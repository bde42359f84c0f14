"""
Use case implementing the 'rm' command.
"""

import posixpath
from typing import Iterator

from vfs_shell.entities.command_result import CommandResult
from vfs_shell.entities.file_stat import DirEntry
from vfs_shell.exceptions import FileSystemError, FileSystemErrorKind
from vfs_shell.use_cases.commands.arguments import parse_flags
from vfs_shell.use_cases.commands.base import BaseShellCommand


class RmCommand(BaseShellCommand):
    """Remove files and directories (-r for directories, -f to ignore failures)."""

    name = "rm"
    description = "Remove files and directories"
    usage = "rm [-rf] file..."

    def run(self, args: list[str], cwd: str) -> CommandResult:
        parsed = parse_flags(args, "rRf", self._logger)
        if not parsed.positionals:
            raise self._usage_error("missing operand")

        recursive = parsed.has("r", "R")
        force = parsed.has("f")

        for path in parsed.positionals:
            try:
                self._remove(path, cwd, recursive)
            except FileSystemError as e:
                if force:
                    self._logger.debug(f"Ignoring failure on {path}: {e}")
                    continue
                raise self._fail(f"cannot remove '{path}': {e}")

        return CommandResult.success()

    def _remove(self, path: str, cwd: str, recursive: bool) -> None:
        if posixpath.basename(path.rstrip("/")) in (".", ".."):
            raise self._fail(f"cannot remove '{path}': Invalid argument")

        self._validate_write(path, cwd)
        absolute_path = self._resolve(path, cwd)

        stats = self._fs.stat(absolute_path)
        if not stats.is_dir:
            self._fs.unlink(absolute_path)
            return

        if not recursive:
            raise self._fail(f"cannot remove '{path}': Is a directory")
        if posixpath.normpath(absolute_path) == "/":
            raise FileSystemError(FileSystemErrorKind.PERMISSION_DENIED, absolute_path)

        self._remove_tree(absolute_path)

    def _remove_tree(self, root: str) -> None:
        """Remove a directory tree, children before their parent directory."""
        stack: list[tuple[str, Iterator[DirEntry]]] = [
            (root, iter(self._fs.readdir(root)))
        ]

        while stack:
            current, entries = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                self._fs.rmdir(current)
                continue

            entry_path = posixpath.join(current, entry.name)
            if entry.is_dir:
                stack.append((entry_path, iter(self._fs.readdir(entry_path))))
            else:
                self._fs.unlink(entry_path)
