import argparse
import logging
import sys

from vfs_shell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from vfs_shell.container import DependencyContainer
from vfs_shell.entities.command_result import CommandResult
from vfs_shell.exceptions import FileSystemError


def _print_plain(result: CommandResult) -> None:
    if result.stdout:
        sys.stdout.write(result.stdout)
    if result.stderr:
        sys.stderr.write(result.stderr)
        if not result.stderr.endswith("\n"):
            sys.stderr.write("\n")


def _print_pretty(command: str, result: CommandResult) -> None:
    from rich.console import Console
    from rich.syntax import Syntax

    out = Console(soft_wrap=True)
    err = Console(stderr=True, soft_wrap=True)
    if result.stdout:
        out.print(result.stdout, end="", markup=False, highlight=False)
    if not result.stderr:
        return
    if command == "diff" and result.exit_code == 1:
        err.print(Syntax(result.stderr.rstrip("\n"), "diff", theme="ansi_dark"))
    else:
        err.print(result.stderr.rstrip("\n"), style="bold red", markup=False)


def _print_commands(container: DependencyContainer, pretty: bool) -> None:
    commands = container.get_commands().values()
    if not pretty:
        for c in commands:
            print(f"{c.name:<8} {c.usage:<34} {c.description}")
        return

    from rich import box
    from rich.console import Console
    from rich.table import Table

    table = Table(box=box.ROUNDED, border_style="magenta")
    table.add_column("command", style="bold")
    table.add_column("usage")
    table.add_column("description")
    for c in commands:
        table.add_row(c.name, c.usage, c.description)
    Console().print(table)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="vfs-shell",
        description="Run one sandboxed file command against the virtual file system.",
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Host directory used as the virtual root (default: VFS_ROOT / in-memory)",
    )
    parser.add_argument(
        "--cwd",
        default=None,
        help="Virtual working directory (default: VFS_DEFAULT_CWD)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty print output with colors",
    )
    parser.add_argument(
        "--list", action="store_true", help="List the available commands and exit"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("command", nargs="?", help="Command name, e.g. mkdir")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Command arguments")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    container = DependencyContainer()
    if args.root:
        try:
            container.set_file_system(LocalFileSystemAdapter(args.root))
        except FileSystemError as e:
            print(f"vfs-shell: {e}", file=sys.stderr)
            return 2

    if args.list:
        _print_commands(container, args.pretty)
        return 0

    if not args.command:
        parser.print_usage(sys.stderr)
        return 2

    try:
        command = container.get_command(args.command)
    except ValueError as e:
        print(f"vfs-shell: {e}", file=sys.stderr)
        return 127

    cwd = args.cwd or container.settings.default_cwd
    result = command.execute(args.args, cwd)
    if args.pretty:
        _print_pretty(command.name, result)
    else:
        _print_plain(result)
    return result.exit_code


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
