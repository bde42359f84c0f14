"""
Port for shell commands, independent of the caller that dispatches them.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from vfs_shell.entities.command_result import CommandResult


class ShellCommandPort(ABC):
    """
    Port interface for a single shell command.

    Implementations expose a lowercase ``name``, a one-line ``description`` and
    a ``usage`` grammar string, and never raise out of ``execute``.
    """

    name: str
    description: str
    usage: str

    @abstractmethod
    def execute(
        self, args: Sequence[str], cwd: str, stdin: Optional[str] = None
    ) -> CommandResult:
        """
        Run the command.

        Args:
            args: Arguments following the command name
            cwd: Working directory relative paths resolve against
            stdin: Standard input, accepted for uniformity and unused here

        Returns:
            CommandResult describing the outcome
        """
        pass
