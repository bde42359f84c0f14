"""
File system port interface defining the virtual file system capability.
"""

from abc import ABC, abstractmethod
from typing import Union

from vfs_shell.entities.file_stat import DirEntry, FileStat


class FileSystemPort(ABC):
    """
    Port interface for the virtual file system the shell commands run against.

    Every path argument is an already resolved absolute virtual path. Failures
    are reported by raising FileSystemError with a kind tag.
    """

    @abstractmethod
    def stat(self, path: str) -> FileStat:
        """
        Get metadata for a path.

        Args:
            path: Absolute virtual path

        Returns:
            FileStat describing the entry

        Raises:
            FileSystemError: NOT_FOUND if the path does not exist
        """
        pass

    @abstractmethod
    def read_file(self, path: str) -> bytes:
        """
        Read the full content of a file.

        Args:
            path: Absolute virtual path of the file

        Returns:
            File content

        Raises:
            FileSystemError: NOT_FOUND, IS_A_DIRECTORY or PERMISSION_DENIED
        """
        pass

    @abstractmethod
    def write_file(self, path: str, data: Union[bytes, str]) -> None:
        """
        Create or overwrite a file. Text is encoded as UTF-8.

        Args:
            path: Absolute virtual path of the file
            data: Content to write

        Raises:
            FileSystemError: NOT_FOUND if the parent is missing, NOT_A_DIRECTORY
                if the parent is a file, IS_A_DIRECTORY if path is a directory
        """
        pass

    @abstractmethod
    def mkdir(self, path: str, recursive: bool = False) -> None:
        """
        Create a directory.

        Args:
            path: Absolute virtual path of the directory
            recursive: Create missing ancestors and accept an existing directory

        Raises:
            FileSystemError: ALREADY_EXISTS, NOT_FOUND or NOT_A_DIRECTORY
        """
        pass

    @abstractmethod
    def readdir(self, path: str) -> list[DirEntry]:
        """
        List the direct children of a directory.

        Args:
            path: Absolute virtual path of the directory

        Returns:
            Entries with their names and types

        Raises:
            FileSystemError: NOT_FOUND or NOT_A_DIRECTORY
        """
        pass

    @abstractmethod
    def rename(self, source: str, target: str) -> None:
        """
        Atomically move a file or directory.

        Args:
            source: Absolute virtual path to move
            target: Absolute virtual destination path

        Raises:
            FileSystemError: NOT_FOUND if source or the target parent is missing
        """
        pass

    @abstractmethod
    def unlink(self, path: str) -> None:
        """
        Remove a file.

        Raises:
            FileSystemError: NOT_FOUND or IS_A_DIRECTORY
        """
        pass

    @abstractmethod
    def rmdir(self, path: str) -> None:
        """
        Remove an empty directory.

        Raises:
            FileSystemError: NOT_FOUND, NOT_A_DIRECTORY or NOT_EMPTY
        """
        pass
