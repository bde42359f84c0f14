"""
Tests for the cp command.
"""

import pytest

from vfs_shell.exceptions import FileSystemError
from vfs_shell.use_cases.commands.cp import CpCommand

CWD = "/projects/app"


@pytest.fixture
def cp(memory_fs, mock_logger):
    return CpCommand(memory_fs, mock_logger)


class TestCpCommand:
    """Test cases for CpCommand."""

    def test_missing_file_operand(self, cp):
        result = cp.execute(["README.md"], CWD)

        assert result.exit_code == 1
        assert result.stderr == (
            "cp: missing file operand\nUsage: cp [-r] source... destination"
        )

    def test_missing_destination_operand(self, cp):
        result = cp.execute(["-r", "src"], CWD)

        assert result.stderr == (
            "cp: missing destination file operand after 'src'\n"
            "Usage: cp [-r] source... destination"
        )

    def test_copy_file(self, cp, memory_fs):
        result = cp.execute(["README.md", "COPY.md"], CWD)

        assert result.ok
        assert memory_fs.read_file("/projects/app/COPY.md") == b"# App\n"
        assert memory_fs.read_file("/projects/app/README.md") == b"# App\n"

    def test_copy_overwrites_file(self, cp, memory_fs):
        result = cp.execute(["README.md", "src/main.py"], CWD)

        assert result.ok
        assert memory_fs.read_file("/projects/app/src/main.py") == b"# App\n"

    def test_copy_into_directory(self, cp, memory_fs):
        result = cp.execute(["README.md", "src/"], CWD)

        assert result.ok
        assert memory_fs.read_file("/projects/app/src/README.md") == b"# App\n"

    def test_copy_creates_missing_parents(self, cp, memory_fs):
        result = cp.execute(["README.md", "docs/guide/intro.md"], CWD)

        assert result.ok
        assert memory_fs.stat("/projects/app/docs/guide").is_dir

    def test_several_sources_need_directory_target(self, cp, memory_fs):
        memory_fs.write_file("/projects/app/a.txt", "a")
        memory_fs.write_file("/projects/app/b.txt", "b")

        result = cp.execute(["a.txt", "b.txt", "c/"], CWD)

        assert result.exit_code == 1
        assert result.stderr == "cp: target 'c/' is not a directory"
        with pytest.raises(FileSystemError):
            memory_fs.stat("/projects/app/c")

    def test_several_sources_into_directory(self, cp, memory_fs):
        memory_fs.mkdir("/projects/app/out")

        result = cp.execute(["README.md", "src/main.py", "out"], CWD)

        assert result.ok
        assert [e.name for e in memory_fs.readdir("/projects/app/out")] == [
            "README.md",
            "main.py",
        ]

    def test_directory_without_recursive(self, cp):
        result = cp.execute(["src", "backup"], CWD)

        assert result.exit_code == 1
        assert result.stderr == "cp: -r not specified; omitting directory 'src'"

    def test_recursive_copy(self, cp, memory_fs):
        result = cp.execute(["-r", "src", "backup"], CWD)

        assert result.ok
        assert memory_fs.read_file("/projects/app/backup/main.py") == b"print('hi')\n"
        assert memory_fs.read_file("/projects/app/backup/utils/helpers.py").startswith(
            b"def helper"
        )
        assert memory_fs.stat("/projects/app/src/main.py").is_file

    def test_recursive_copy_into_existing_directory(self, cp, memory_fs):
        result = cp.execute(["-R", "src/utils", "/tmp"], CWD)

        assert result.ok
        assert memory_fs.stat("/tmp/utils/helpers.py").is_file

    def test_copy_directory_into_itself(self, cp):
        result = cp.execute(["-r", "src", "src/inner"], CWD)

        assert result.exit_code == 1
        assert result.stderr == (
            "cp: cannot copy a directory, 'src', into itself, 'src/inner'"
        )

    def test_missing_source(self, cp):
        result = cp.execute(["ghost.txt", "copy.txt"], CWD)

        assert result.exit_code == 1
        assert result.stderr == "cp: cannot stat 'ghost.txt': No such file or directory"

    def test_source_outside_the_sandbox_may_be_read(self, cp, memory_fs):
        memory_fs.mkdir("/etc")
        memory_fs.write_file("/etc/hosts", "127.0.0.1 localhost\n")

        result = cp.execute(["/etc/hosts", "hosts"], CWD)

        assert result.ok
        assert memory_fs.read_file("/projects/app/hosts") == b"127.0.0.1 localhost\n"

    def test_denied_destination(self, cp):
        result = cp.execute(["README.md", "/etc/README.md"], CWD)

        assert result.exit_code == 1
        assert result.stderr.startswith("cp: write access denied to /etc/README.md.")
