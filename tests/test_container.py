"""
Tests for the dependency container.
"""

import pytest

from vfs_shell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from vfs_shell.adapters.files.memory_fs_adapter import InMemoryFileSystemAdapter
from vfs_shell.config.settings import Settings
from vfs_shell.container import DependencyContainer


@pytest.fixture
def memory_settings(monkeypatch):
    for key in ("VFS_BACKEND", "VFS_ROOT", "VFS_DEFAULT_CWD", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("VFS_DEFAULT_CWD", "/projects/demo")
    return Settings()


class TestDependencyContainer:
    """Test cases for DependencyContainer."""

    def test_memory_backend_is_seeded(self, memory_settings):
        container = DependencyContainer(memory_settings)

        file_system = container.get_file_system()

        assert isinstance(file_system, InMemoryFileSystemAdapter)
        assert file_system.stat("/tmp").is_dir
        assert file_system.stat("/projects/demo").is_dir

    def test_local_backend(self, monkeypatch, temp_directory):
        monkeypatch.setenv("VFS_BACKEND", "local")
        monkeypatch.setenv("VFS_ROOT", temp_directory)
        container = DependencyContainer(Settings())

        file_system = container.get_file_system()

        assert isinstance(file_system, LocalFileSystemAdapter)
        assert file_system.stat("/projects/app/README.md").is_file

    def test_commands_share_the_file_system(self, dependency_container, memory_fs):
        commands = dependency_container.get_commands()

        assert list(commands) == ["touch", "mkdir", "cp", "mv", "rm", "diff"]
        assert all(c._fs is memory_fs for c in commands.values())
        assert dependency_container.get_commands() is commands

    def test_get_command(self, dependency_container):
        assert dependency_container.get_command("rm").name == "rm"

    def test_unknown_command(self, dependency_container):
        with pytest.raises(ValueError, match="Unknown command: ls"):
            dependency_container.get_command("ls")

    def test_set_file_system_rebinds_commands(self, dependency_container):
        before = dependency_container.get_command("touch")
        replacement = InMemoryFileSystemAdapter(directories=["/tmp"])

        dependency_container.set_file_system(replacement)

        after = dependency_container.get_command("touch")
        assert after is not before
        assert after._fs is replacement
