"""
Tests for the CommandResult entity.
"""

import pytest

from vfs_shell.entities.command_result import CommandResult


class TestCommandResult:
    """Test cases for the CommandResult entity."""

    def test_success(self):
        result = CommandResult.success("done\n")

        assert result.exit_code == 0
        assert result.ok
        assert result.stdout == "done\n"
        assert result.stderr == ""

    def test_error_defaults_to_exit_code_one(self):
        result = CommandResult.error("touch: x: Is a directory")

        assert result.exit_code == 1
        assert not result.ok
        assert result.stdout == ""

    def test_error_with_custom_exit_code(self):
        assert CommandResult.error("trouble", 2).exit_code == 2

    def test_error_requires_nonzero_exit_code(self):
        with pytest.raises(ValueError):
            CommandResult.error("oops", 0)

    def test_get_details(self):
        details = CommandResult.error("bad", 2).get_details()
        assert details == {"exit_code": 2, "stdout": "", "stderr": "bad"}
