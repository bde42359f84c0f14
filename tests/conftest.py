"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
import pytest
from unittest.mock import MagicMock

from vfs_shell.adapters.files.memory_fs_adapter import InMemoryFileSystemAdapter
from vfs_shell.container import DependencyContainer
from vfs_shell.ports.files.file_system_port import FileSystemPort

CWD = "/projects/app"


@pytest.fixture(autouse=True)
def default_zones(monkeypatch):
    """Pin the sandbox zones regardless of the developer's environment."""
    monkeypatch.delenv("VFS_TMP_PATH", raising=False)
    monkeypatch.delenv("VFS_PROJECTS_PATH", raising=False)


@pytest.fixture
def temp_directory():
    """
    Create a temporary host directory laid out like a virtual root.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        project = os.path.join(temp_dir, "projects", "app")
        os.makedirs(os.path.join(project, "src"))
        os.makedirs(os.path.join(temp_dir, "tmp"))

        with open(os.path.join(project, "README.md"), "w") as f:
            f.write("# App\n")

        with open(os.path.join(project, "src", "main.py"), "w") as f:
            f.write("print('Hello, world!')\n")

        yield temp_dir


@pytest.fixture
def memory_fs():
    """
    Create an in-memory file system with a small project.

    Returns:
        InMemoryFileSystemAdapter rooted at / with /tmp and /projects/app
    """
    return InMemoryFileSystemAdapter(
        directories=["/tmp", CWD + "/src/utils"],
        files={
            CWD + "/README.md": "# App\n",
            CWD + "/src/main.py": "print('hi')\n",
            CWD + "/src/utils/helpers.py": "def helper():\n    return 1\n",
        },
    )


@pytest.fixture
def spy_fs():
    """
    Create a spy file system that records every call.

    Returns:
        MagicMock constrained to the FileSystemPort interface
    """
    return MagicMock(spec=FileSystemPort)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def dependency_container(mock_logger, memory_fs):
    """
    Create a dependency container backed by the in-memory file system.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    container.set_file_system(memory_fs)
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
