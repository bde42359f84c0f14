"""
Tests for the touch command.
"""

import pytest

from vfs_shell.exceptions import FileSystemError
from vfs_shell.use_cases.commands.touch import TouchCommand

CWD = "/projects/app"


@pytest.fixture
def touch(memory_fs, mock_logger):
    return TouchCommand(memory_fs, mock_logger)


class TestTouchCommand:
    """Test cases for TouchCommand."""

    def test_metadata(self, touch):
        assert touch.name == "touch"
        assert touch.usage == "touch file..."

    def test_missing_operand(self, touch):
        result = touch.execute([], CWD)

        assert result.exit_code == 1
        assert result.stderr == "touch: missing file operand\nUsage: touch file..."

    def test_creates_empty_files(self, touch, memory_fs):
        result = touch.execute(["a.txt", "src/b.txt"], CWD)

        assert result.ok
        assert result.stdout == ""
        assert memory_fs.read_file("/projects/app/a.txt") == b""
        assert memory_fs.read_file("/projects/app/src/b.txt") == b""

    def test_existing_file_is_left_alone(self, touch, memory_fs):
        result = touch.execute(["README.md"], CWD)

        assert result.ok
        assert memory_fs.read_file("/projects/app/README.md") == b"# App\n"

    def test_directory_operand(self, touch):
        result = touch.execute(["src"], CWD)

        assert result.exit_code == 1
        assert result.stderr == "touch: src: Is a directory"

    def test_missing_parent(self, touch, memory_fs):
        result = touch.execute(["nope/a.txt"], CWD)

        assert result.exit_code == 1
        assert result.stderr == (
            "touch: cannot touch 'nope/a.txt': No such file or directory"
        )
        with pytest.raises(FileSystemError):
            memory_fs.stat("/projects/app/nope")

    def test_absolute_path_in_tmp(self, touch, memory_fs):
        result = touch.execute(["/tmp/scratch.txt"], CWD)

        assert result.ok
        assert memory_fs.stat("/tmp/scratch.txt").is_file

    def test_denied_absolute_path(self, touch):
        result = touch.execute(["/etc/passwd"], CWD)

        assert result.exit_code == 1
        assert result.stderr == (
            "touch: write access denied to /etc/passwd. Write operations are only "
            "allowed in project directories and /tmp/ (current directory: /projects/app)"
        )

    def test_stops_at_first_failure(self, touch, memory_fs):
        result = touch.execute(["first.txt", "src", "last.txt"], CWD)

        assert result.exit_code == 1
        assert memory_fs.stat("/projects/app/first.txt").is_file
        with pytest.raises(FileSystemError):
            memory_fs.stat("/projects/app/last.txt")

    def test_unexpected_error_is_reported(self, spy_fs, mock_logger):
        spy_fs.stat.side_effect = RuntimeError("disk on fire")
        touch = TouchCommand(spy_fs, mock_logger)

        result = touch.execute(["a.txt"], CWD)

        assert result.exit_code == 1
        assert result.stderr == "touch: disk on fire"
        mock_logger.exception.assert_called_once()
