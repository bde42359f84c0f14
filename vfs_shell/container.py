"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from vfs_shell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from vfs_shell.adapters.files.memory_fs_adapter import InMemoryFileSystemAdapter
from vfs_shell.config.settings import Settings, settings
from vfs_shell.ports.commands.shell_command_port import ShellCommandPort
from vfs_shell.ports.files.file_system_port import FileSystemPort
from vfs_shell.use_cases.commands.cp import CpCommand
from vfs_shell.use_cases.commands.diff import DiffCommand
from vfs_shell.use_cases.commands.mkdir import MkdirCommand
from vfs_shell.use_cases.commands.mv import MvCommand
from vfs_shell.use_cases.commands.rm import RmCommand
from vfs_shell.use_cases.commands.touch import TouchCommand

COMMAND_TYPES: tuple[type, ...] = (
    TouchCommand,
    MkdirCommand,
    CpCommand,
    MvCommand,
    RmCommand,
    DiffCommand,
)


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, config: Optional[Settings] = None):
        self._instances = {}
        self._settings = config or settings
        self._logger = logging.getLogger(__name__)

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_file_system(self) -> FileSystemPort:
        """
        Get the configured file system adapter instance.

        The in-memory backend is seeded with the temp, projects and default
        working directories.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            if self._settings.backend == "local":
                file_system: FileSystemPort = LocalFileSystemAdapter(
                    self._settings.root, self._logger
                )
            else:
                file_system = InMemoryFileSystemAdapter(
                    directories=[
                        self._settings.tmp_path,
                        self._settings.projects_path,
                        self._settings.default_cwd,
                    ],
                    logger=self._logger,
                )
            self._instances["file_system"] = file_system
        return self._instances["file_system"]

    def set_file_system(self, file_system: FileSystemPort) -> None:
        """Replace the file system and drop commands bound to the previous one."""
        self.reset()
        self._instances["file_system"] = file_system

    def get_commands(self) -> dict[str, ShellCommandPort]:
        """
        Get every shell command with injected dependencies.

        Returns:
            Mapping of command name to configured command
        """
        if "commands" not in self._instances:
            file_system = self.get_file_system()
            commands = [cls(file_system, self._logger) for cls in COMMAND_TYPES]
            self._instances["commands"] = {c.name: c for c in commands}
        return self._instances["commands"]

    def get_command(self, name: str) -> ShellCommandPort:
        """
        Get a single command by name.

        Raises:
            ValueError: If no command has that name
        """
        commands = self.get_commands()
        if name not in commands:
            raise ValueError(f"Unknown command: {name}")
        return commands[name]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
