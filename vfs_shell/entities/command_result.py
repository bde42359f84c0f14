"""
Command result entity shared by every shell command.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of a single command invocation.

    ``exit_code`` is 0 only when the whole invocation succeeded. Errors, usage
    problems and detected differences (for ``diff``) are written to ``stderr``.
    """

    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @classmethod
    def success(cls, stdout: str = "") -> "CommandResult":
        """Build a successful result carrying ``stdout``."""
        return cls(exit_code=0, stdout=stdout)

    @classmethod
    def error(cls, stderr: str, exit_code: int = 1) -> "CommandResult":
        """
        Build a failed result.

        Args:
            stderr: Message written to standard error
            exit_code: Non-zero exit status (default: 1)

        Raises:
            ValueError: If exit_code is not a positive integer
        """
        if exit_code <= 0:
            raise ValueError("Error results need a positive exit code")
        return cls(exit_code=exit_code, stderr=stderr)

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    def get_details(self) -> dict[str, object]:
        """
        Get the result as a plain dictionary.

        Returns:
            Dictionary with exit_code, stdout and stderr
        """
        return {
            "exit_code": self.exit_code,
            "stdout": self.stdout,
            "stderr": self.stderr,
        }
