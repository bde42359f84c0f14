from __future__ import annotations

import os
import posixpath
import re
from typing import Optional

from vfs_shell.exceptions import SecurityError

"""Write sandbox for the virtual file system.

Relative paths are always writable (they resolve under the working directory).
Absolute paths are allow-listed: they must fall inside the temp zone, the
projects zone or the working directory.

Environment variables:
- VFS_TMP_PATH: temp zone root. Defaults to /tmp.
- VFS_PROJECTS_PATH: projects zone root. Defaults to /projects.
"""

DEFAULT_TMP_PATH = "/tmp"
DEFAULT_PROJECTS_PATH = "/projects"

_DRIVE_PREFIX = re.compile(r"^[A-Za-z]:[\\/]")


def get_tmp_root() -> str:
    return _normalize_zone(os.getenv("VFS_TMP_PATH") or DEFAULT_TMP_PATH)


def get_projects_root() -> str:
    return _normalize_zone(os.getenv("VFS_PROJECTS_PATH") or DEFAULT_PROJECTS_PATH)


def _to_posix(path: str) -> str:
    """Treat backslashes as separators, the way the file system adapters do."""
    return path.replace("\\", "/")


def _normalize_zone(path: str) -> str:
    return posixpath.normpath(_to_posix(str(path).strip()) or "/")


def is_absolute(path: str) -> bool:
    """True for a leading '/', a leading '\\' (UNC included) or a drive prefix."""
    return path.startswith("/") or path.startswith("\\") or bool(
        _DRIVE_PREFIX.match(path)
    )


def resolve_path(path: str, cwd: str) -> str:
    """Resolve ``path`` against ``cwd``; absolute paths are returned as-is."""
    if is_absolute(path):
        return path
    return posixpath.normpath(posixpath.join(cwd, _to_posix(path)))


def _is_within(path: str, zone: str) -> bool:
    if zone == "/":
        return path.startswith("/")
    return path == zone or path.startswith(zone + "/")


def is_write_allowed(
    path: str,
    cwd: Optional[str] = None,
    tmp_path: Optional[str] = None,
    projects_path: Optional[str] = None,
) -> bool:
    """Return whether a write to ``path`` is inside the sandbox."""
    if not is_absolute(path):
        return True
    normalized = posixpath.normpath(_to_posix(path))
    zones = [
        _normalize_zone(tmp_path) if tmp_path else get_tmp_root(),
        _normalize_zone(projects_path) if projects_path else get_projects_root(),
    ]
    if cwd:
        zones.append(_normalize_zone(cwd))
    return any(_is_within(normalized, zone) for zone in zones)


def validate_write_path(
    path: str, operation_name: str, cwd: Optional[str] = None
) -> None:
    """Raise SecurityError when ``path`` may not be written by ``operation_name``."""
    if is_write_allowed(path, cwd):
        return
    message = (
        f"{operation_name}: write access denied to {path}. "
        f"Write operations are only allowed in project directories and "
        f"{get_tmp_root().rstrip('/')}/"
    )
    if cwd:
        message += f" (current directory: {cwd})"
    raise SecurityError(message)


def describe_denied(
    path: str, tool_name: Optional[str] = None, cwd: Optional[str] = None
) -> str:
    """Long-form explanation of a denied write, listing the allowed zones."""
    tmp_root = get_tmp_root()
    projects_root = get_projects_root()
    if tool_name:
        lines = [f'{tool_name}: write access denied to "{path}".']
    else:
        lines = [f"Write access denied to {path}."]
    lines += [
        "",
        "Write operations are only allowed in:",
        "- Current project directory (relative paths)",
        f"- {tmp_root}/ directory and its subdirectories",
        f"- {projects_root}/ directory and its subdirectories",
    ]
    if cwd:
        lines += ["", f"Current working directory: {cwd}"]
    lines += [
        "",
        "Examples of allowed paths:",
        "- src/index.ts",
        "- ./notes/todo.md",
        f"- {posixpath.join(tmp_root, 'scratch.txt')}",
        f"- {posixpath.join(projects_root, 'my-project', 'README.md')}",
    ]
    return "\n".join(lines)
