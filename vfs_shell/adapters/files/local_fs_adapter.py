"""
Local file system adapter mapping the virtual file system onto a host directory.
"""

import errno
import logging
import os
import posixpath
from typing import Union

from typing_extensions import override

from vfs_shell.entities.file_stat import DirEntry, FileStat
from vfs_shell.exceptions import FileSystemError, FileSystemErrorKind
from vfs_shell.ports.files.file_system_port import FileSystemPort

_ERRNO_KINDS = {
    errno.ENOENT: FileSystemErrorKind.NOT_FOUND,
    errno.EEXIST: FileSystemErrorKind.ALREADY_EXISTS,
    errno.EISDIR: FileSystemErrorKind.IS_A_DIRECTORY,
    errno.ENOTDIR: FileSystemErrorKind.NOT_A_DIRECTORY,
    errno.ENOTEMPTY: FileSystemErrorKind.NOT_EMPTY,
    errno.EACCES: FileSystemErrorKind.PERMISSION_DENIED,
    errno.EPERM: FileSystemErrorKind.PERMISSION_DENIED,
    errno.EINVAL: FileSystemErrorKind.INVALID_ARGUMENT,
}


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the file system port.

    Virtual absolute paths are mapped below ``root``: ``/projects/app`` becomes
    ``<root>/projects/app``. Paths can never resolve outside of ``root``.
    """

    def __init__(self, root: str, logger: logging.Logger | None = None):
        """
        Initialize the adapter.

        Args:
            root: Host directory acting as the virtual root
            logger: Logger instance to use for logging. If None, a default logger will be created.

        Raises:
            FileSystemError: If root does not exist or is not a directory
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._root = os.path.realpath(os.path.expanduser(root))
        self._validate_directory(self._root)

    @property
    def root(self) -> str:
        return self._root

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Host path to validate

        Raises:
            FileSystemError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise FileSystemError(
                FileSystemErrorKind.NOT_FOUND,
                directory,
                f"Directory does not exist: {directory}",
            )

        if not os.path.isdir(directory):
            raise FileSystemError(
                FileSystemErrorKind.NOT_A_DIRECTORY,
                directory,
                f"Path is not a directory: {directory}",
            )

    def _host_path(self, path: str) -> str:
        """Translate a virtual path into a host path confined to the root."""
        virtual = posixpath.normpath(posixpath.join("/", path.replace("\\", "/")))
        host = os.path.normpath(os.path.join(self._root, virtual.lstrip("/")))
        if os.path.commonpath([self._root, host]) != self._root:
            raise FileSystemError(FileSystemErrorKind.PERMISSION_DENIED, path)
        return host

    def _translate(self, error: OSError, path: str) -> FileSystemError:
        kind = _ERRNO_KINDS.get(error.errno or 0, FileSystemErrorKind.UNKNOWN)
        detail = error.strerror if kind is FileSystemErrorKind.UNKNOWN else None
        if kind is FileSystemErrorKind.UNKNOWN:
            self._logger.warning(f"Unmapped OS error on {path}: {error}")
        return FileSystemError(kind, path, detail)

    @override
    def stat(self, path: str) -> FileStat:
        host = self._host_path(path)
        try:
            st = os.stat(host)
        except OSError as e:
            raise self._translate(e, path) from e
        if os.path.isdir(host):
            return FileStat.directory()
        return FileStat.file(int(st.st_size))

    @override
    def read_file(self, path: str) -> bytes:
        host = self._host_path(path)
        try:
            with open(host, "rb") as f:
                return f.read()
        except OSError as e:
            raise self._translate(e, path) from e

    @override
    def write_file(self, path: str, data: Union[bytes, str]) -> None:
        host = self._host_path(path)
        content = data.encode("utf-8") if isinstance(data, str) else data
        try:
            with open(host, "wb") as f:
                f.write(content)
        except OSError as e:
            raise self._translate(e, path) from e

    @override
    def mkdir(self, path: str, recursive: bool = False) -> None:
        host = self._host_path(path)
        try:
            if recursive:
                os.makedirs(host, exist_ok=True)
            else:
                os.mkdir(host)
        except FileExistsError as e:
            # makedirs(exist_ok=True) still fails when a file is in the way
            raise FileSystemError(FileSystemErrorKind.ALREADY_EXISTS, path) from e
        except OSError as e:
            raise self._translate(e, path) from e

    @override
    def readdir(self, path: str) -> list[DirEntry]:
        host = self._host_path(path)
        try:
            with os.scandir(host) as it:
                entries = [DirEntry(name=e.name, is_dir=e.is_dir()) for e in it]
        except OSError as e:
            raise self._translate(e, path) from e
        return sorted(entries, key=lambda e: e.name)

    @override
    def rename(self, source: str, target: str) -> None:
        src = self._host_path(source)
        dst = self._host_path(target)
        try:
            os.rename(src, dst)
        except OSError as e:
            raise self._translate(e, source) from e

    @override
    def unlink(self, path: str) -> None:
        host = self._host_path(path)
        if os.path.isdir(host) and not os.path.islink(host):
            raise FileSystemError(FileSystemErrorKind.IS_A_DIRECTORY, path)
        try:
            os.unlink(host)
        except OSError as e:
            raise self._translate(e, path) from e

    @override
    def rmdir(self, path: str) -> None:
        host = self._host_path(path)
        if host == self._root:
            raise FileSystemError(FileSystemErrorKind.PERMISSION_DENIED, path)
        try:
            os.rmdir(host)
        except OSError as e:
            raise self._translate(e, path) from e

