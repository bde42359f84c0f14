"""
In-memory file system adapter implementation.
"""

import logging
import posixpath
from typing import Iterable, Optional, Union

from typing_extensions import override

from vfs_shell.entities.file_stat import DirEntry, FileStat
from vfs_shell.exceptions import FileSystemError, FileSystemErrorKind
from vfs_shell.ports.files.file_system_port import FileSystemPort


class InMemoryFileSystemAdapter(FileSystemPort):
    """Dictionary-backed implementation of the file system port.

    Directories are kept in a set and files in a path -> bytes mapping. The
    root directory always exists.
    """

    def __init__(
        self,
        directories: Iterable[str] = (),
        files: Optional[dict[str, Union[bytes, str]]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the adapter, optionally seeding it.

        Args:
            directories: Directories to create (with their parents)
            files: Files to create, mapping path to content (parents are created)
            logger: Logger instance to use for logging
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._dirs: set[str] = {"/"}
        self._files: dict[str, bytes] = {}

        for directory in directories:
            self.mkdir(directory, recursive=True)
        for path, content in (files or {}).items():
            self.mkdir(posixpath.dirname(self._normalize(path)), recursive=True)
            self.write_file(path, content)

    @staticmethod
    def _normalize(path: str) -> str:
        return posixpath.normpath(posixpath.join("/", path.replace("\\", "/")))

    def _check_parent(self, path: str) -> None:
        """Ensure every ancestor of ``path`` is an existing directory."""
        parent = posixpath.dirname(path)
        if parent in self._dirs:
            return
        while parent != "/":
            if parent in self._files:
                raise FileSystemError(FileSystemErrorKind.NOT_A_DIRECTORY, path)
            parent = posixpath.dirname(parent)
        raise FileSystemError(FileSystemErrorKind.NOT_FOUND, path)

    def _children(self, path: str) -> list[str]:
        prefix = path.rstrip("/") + "/"
        names = {
            p[len(prefix):].split("/", 1)[0]
            for p in [*self._dirs, *self._files]
            if p.startswith(prefix) and p != prefix
        }
        return sorted(names)

    @override
    def stat(self, path: str) -> FileStat:
        p = self._normalize(path)
        if p in self._dirs:
            return FileStat.directory()
        if p in self._files:
            return FileStat.file(len(self._files[p]))
        self._check_parent(p)
        raise FileSystemError(FileSystemErrorKind.NOT_FOUND, p)

    @override
    def read_file(self, path: str) -> bytes:
        p = self._normalize(path)
        if p in self._dirs:
            raise FileSystemError(FileSystemErrorKind.IS_A_DIRECTORY, p)
        if p not in self._files:
            self._check_parent(p)
            raise FileSystemError(FileSystemErrorKind.NOT_FOUND, p)
        return self._files[p]

    @override
    def write_file(self, path: str, data: Union[bytes, str]) -> None:
        p = self._normalize(path)
        if p in self._dirs:
            raise FileSystemError(FileSystemErrorKind.IS_A_DIRECTORY, p)
        self._check_parent(p)
        self._files[p] = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        self._logger.debug(f"Wrote {len(self._files[p])} bytes to {p}")

    @override
    def mkdir(self, path: str, recursive: bool = False) -> None:
        p = self._normalize(path)
        if p in self._files:
            raise FileSystemError(FileSystemErrorKind.ALREADY_EXISTS, p)
        if p in self._dirs:
            if recursive:
                return
            raise FileSystemError(FileSystemErrorKind.ALREADY_EXISTS, p)

        if recursive:
            missing: list[str] = []
            current = p
            while current not in self._dirs:
                if current in self._files:
                    raise FileSystemError(FileSystemErrorKind.NOT_A_DIRECTORY, p)
                missing.append(current)
                current = posixpath.dirname(current)
            self._dirs.update(missing)
            return

        self._check_parent(p)
        self._dirs.add(p)

    @override
    def readdir(self, path: str) -> list[DirEntry]:
        p = self._normalize(path)
        if p in self._files:
            raise FileSystemError(FileSystemErrorKind.NOT_A_DIRECTORY, p)
        if p not in self._dirs:
            raise FileSystemError(FileSystemErrorKind.NOT_FOUND, p)
        base = p.rstrip("/")
        return [
            DirEntry(name=name, is_dir=f"{base}/{name}" in self._dirs)
            for name in self._children(p)
        ]

    @override
    def rename(self, source: str, target: str) -> None:
        src = self._normalize(source)
        dst = self._normalize(target)
        if src == dst:
            return
        if src not in self._dirs and src not in self._files:
            raise FileSystemError(FileSystemErrorKind.NOT_FOUND, src)
        self._check_parent(dst)

        if src in self._files:
            if dst in self._dirs:
                raise FileSystemError(FileSystemErrorKind.IS_A_DIRECTORY, dst)
            self._files[dst] = self._files.pop(src)
            return

        if src == "/" or dst.startswith(src + "/"):
            raise FileSystemError(FileSystemErrorKind.INVALID_ARGUMENT, dst)
        if dst in self._files:
            raise FileSystemError(FileSystemErrorKind.NOT_A_DIRECTORY, dst)
        if dst in self._dirs:
            if self._children(dst):
                raise FileSystemError(FileSystemErrorKind.NOT_EMPTY, dst)
            self._dirs.discard(dst)

        prefix = src + "/"
        self._dirs = {
            dst + d[len(src):] if d == src or d.startswith(prefix) else d
            for d in self._dirs
        }
        self._files = {
            (dst + f[len(src):] if f.startswith(prefix) else f): content
            for f, content in self._files.items()
        }
        self._logger.debug(f"Moved directory {src} to {dst}")

    @override
    def unlink(self, path: str) -> None:
        p = self._normalize(path)
        if p in self._dirs:
            raise FileSystemError(FileSystemErrorKind.IS_A_DIRECTORY, p)
        if p not in self._files:
            raise FileSystemError(FileSystemErrorKind.NOT_FOUND, p)
        del self._files[p]

    @override
    def rmdir(self, path: str) -> None:
        p = self._normalize(path)
        if p in self._files:
            raise FileSystemError(FileSystemErrorKind.NOT_A_DIRECTORY, p)
        if p not in self._dirs:
            raise FileSystemError(FileSystemErrorKind.NOT_FOUND, p)
        if p == "/":
            raise FileSystemError(FileSystemErrorKind.PERMISSION_DENIED, p)
        if self._children(p):
            raise FileSystemError(FileSystemErrorKind.NOT_EMPTY, p)
        self._dirs.discard(p)
