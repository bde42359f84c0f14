"""
Use case implementing the 'diff' command.
"""

from vfs_shell.entities.command_result import CommandResult
from vfs_shell.entities.diff import LineDiff
from vfs_shell.entities.file_stat import FileStat
from vfs_shell.exceptions import FileSystemError, FileSystemErrorKind
from vfs_shell.use_cases.commands.arguments import parse_flags
from vfs_shell.use_cases.commands.base import BaseShellCommand
from vfs_shell.utils.path_security import is_absolute

DIFFERENCES_FOUND = 1


def _decode(content: bytes) -> str:
    # undecodable bytes render as escapes such as \xff
    return content.decode("utf-8", errors="backslashreplace")


class DiffCommand(BaseShellCommand):
    """
    Compare two files line by line.

    Exit status 0 means identical, 1 means differences were found (the diff is
    written to stderr) and 2 means trouble. Absolute operands are refused.
    """

    name = "diff"
    description = "Compare files line by line"
    usage = "diff [-u] file1 file2"
    failure_exit_code = 2

    def run(self, args: list[str], cwd: str) -> CommandResult:
        parsed = parse_flags(args, "u", self._logger)
        unified = parsed.has("u")
        files = parsed.positionals

        if len(files) < 2:
            raise self._usage_error("missing operand (need exactly 2 files)")
        if len(files) > 2:
            raise self._usage_error(f"extra operand '{files[2]}'")

        file1, file2 = files
        for path in files:
            if is_absolute(path):
                raise self._fail(f"absolute paths are not supported: {path}")

        path1 = self._resolve(file1, cwd)
        path2 = self._resolve(file2, cwd)

        stats1 = self._stat(file1, path1)
        stats2 = self._stat(file2, path2)
        if stats1.is_dir:
            raise self._fail(f"{file1}: Is a directory")
        if stats2.is_dir:
            raise self._fail(f"{file2}: Is a directory")

        content1 = self._read(file1, path1)
        content2 = self._read(file2, path2)
        if content1 == content2:
            return CommandResult.success()

        diff = LineDiff(_decode(content1), _decode(content2))
        if diff.identical:
            return CommandResult.error(
                f"Files {file1} and {file2} differ\n", DIFFERENCES_FOUND
            )

        if unified:
            output = diff.render_unified(file1, file2)
        else:
            output = diff.render_normal()
        return CommandResult.error(output, DIFFERENCES_FOUND)

    def _stat(self, file_path: str, absolute_path: str) -> FileStat:
        try:
            return self._fs.stat(absolute_path)
        except FileSystemError as e:
            raise self._fail(self._describe(file_path, e))

    def _read(self, file_path: str, absolute_path: str) -> bytes:
        try:
            return self._fs.read_file(absolute_path)
        except FileSystemError as e:
            raise self._fail(self._describe(file_path, e))

    def _describe(self, file_path: str, error: FileSystemError) -> str:
        if error.kind in (
            FileSystemErrorKind.NOT_FOUND,
            FileSystemErrorKind.NOT_A_DIRECTORY,
        ):
            return f"{file_path}: No such file or directory"
        if error.kind is FileSystemErrorKind.PERMISSION_DENIED:
            return f"{file_path}: Permission denied"
        return f"{file_path}: {error}"
