"""
FastAPI dependency functions for retrieving commands from the container.
"""

from vfs_shell.container import container
from vfs_shell.ports.commands.shell_command_port import ShellCommandPort


def get_commands() -> dict[str, ShellCommandPort]:
    """
    Get all commands from the container.

    Returns:
        Mapping of command name to command
    """
    return container.get_commands()


def get_default_cwd() -> str:
    """
    Get the working directory used when a request does not name one.

    Returns:
        The configured default working directory
    """
    return container.settings.default_cwd
