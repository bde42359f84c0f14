"""
Use case implementing the 'cp' command.
"""

import posixpath
from typing import Iterator

from vfs_shell.entities.command_result import CommandResult
from vfs_shell.entities.file_stat import DirEntry
from vfs_shell.exceptions import FileSystemError, FileSystemErrorKind
from vfs_shell.use_cases.commands.arguments import parse_flags
from vfs_shell.use_cases.commands.base import BaseShellCommand, target_basename


class CpCommand(BaseShellCommand):
    """
    Copy files and directories.

    Only the destination is write-validated; sources may be read from anywhere
    the file system exposes.
    """

    name = "cp"
    description = "Copy files and directories"
    usage = "cp [-r] source... destination"

    def run(self, args: list[str], cwd: str) -> CommandResult:
        if len(args) < 2:
            raise self._usage_error("missing file operand")

        parsed = parse_flags(args, "rR", self._logger)
        paths = parsed.positionals
        if len(paths) < 2:
            first = paths[0] if paths else ""
            raise self._usage_error(f"missing destination file operand after '{first}'")

        sources, destination = paths[:-1], paths[-1]
        recursive = parsed.has("r", "R")

        self._validate_write(destination, cwd)
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
                self._copy(source, source_path, target_path, destination, recursive)
            except FileSystemError as e:
                if e.is_not_found:
                    raise self._fail(f"cannot stat '{source}': No such file or directory")
                if e.kind is FileSystemErrorKind.PERMISSION_DENIED:
                    raise self._fail(f"cannot access '{source}': Permission denied")
                raise self._fail(f"cannot copy '{source}': {e}")

        return CommandResult.success()

    def _copy(
        self,
        source: str,
        source_path: str,
        target_path: str,
        destination: str,
        recursive: bool,
    ) -> None:
        source_stats = self._fs.stat(source_path)

        if not source_stats.is_dir:
            self._copy_file(source_path, target_path)
            return

        if not recursive:
            raise self._fail(f"-r not specified; omitting directory '{source}'")

        normalized_target = posixpath.normpath(target_path)
        normalized_source = posixpath.normpath(source_path)
        if normalized_target == normalized_source or normalized_target.startswith(
            normalized_source.rstrip("/") + "/"
        ):
            raise self._fail(
                f"cannot copy a directory, '{source}', into itself, '{destination}'"
            )

        self._copy_tree(source_path, target_path)

    def _copy_file(self, source_path: str, target_path: str) -> None:
        self._ensure_parent(target_path)
        content = self._fs.read_file(source_path)
        self._fs.write_file(target_path, content)
        self._logger.debug(f"Copied {source_path} to {target_path}")

    def _copy_tree(self, source_path: str, target_path: str) -> None:
        """
        Copy a directory tree depth-first, parents before children.

        Uses a stack of directory iterators so entries are visited in the same
        order as a recursive walk without growing the Python call stack.
        """
        self._fs.mkdir(target_path, recursive=True)
        stack: list[tuple[str, str, Iterator[DirEntry]]] = [
            (source_path, target_path, iter(self._fs.readdir(source_path)))
        ]

        while stack:
            current_source, current_target, entries = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                continue

            entry_source = posixpath.join(current_source, entry.name)
            entry_target = posixpath.join(current_target, entry.name)
            if entry.is_dir:
                self._fs.mkdir(entry_target, recursive=True)
                stack.append(
                    (entry_source, entry_target, iter(self._fs.readdir(entry_source)))
                )
            else:
                self._copy_file(entry_source, entry_target)
