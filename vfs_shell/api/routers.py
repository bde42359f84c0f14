"""
FastAPI router definitions for the API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from vfs_shell.api.dependencies import get_commands, get_default_cwd
from vfs_shell.api.schemas import (
    CommandInfo,
    CommandListResponse,
    CommandRequest,
    CommandResultResponse,
    ErrorResponse,
    WriteCheckResponse,
)
from vfs_shell.utils.path_security import describe_denied, is_write_allowed

router = APIRouter()


@router.get("/commands", response_model=CommandListResponse)
def list_commands():
    """
    List the available commands.

    Returns:
        CommandListResponse: Name, description and usage of every command
    """
    commands = get_commands()
    return CommandListResponse(
        commands=[CommandInfo.from_command(c) for c in commands.values()]
    )


@router.post(
    "/commands/{name}",
    response_model=CommandResultResponse,
    responses={404: {"model": ErrorResponse}},
)
def run_command(name: str, body: CommandRequest):
    """
    Run one command against the virtual file system.

    Args:
        name: Command name
        body: Arguments, working directory and optional stdin

    Returns:
        CommandResultResponse: Exit code and captured output

    Raises:
        HTTPException: If the command is unknown
    """
    commands = get_commands()
    command = commands.get(name)
    if command is None:
        raise HTTPException(status_code=404, detail=f"Unknown command: {name}")

    cwd = body.cwd or get_default_cwd()
    result = command.execute(body.args, cwd, body.stdin)
    return CommandResultResponse.from_entity(result)


@router.get("/security/write-check", response_model=WriteCheckResponse)
def write_check(
    path: str = Query(..., description="Path to check"),
    cwd: Optional[str] = Query(None, description="Working directory"),
):
    """
    Check whether a write to a path is allowed by the sandbox.

    Args:
        path: Path to check
        cwd: Optional working directory, itself an allowed zone

    Returns:
        WriteCheckResponse: Decision and, when denied, a detailed explanation
    """
    allowed = is_write_allowed(path, cwd)
    message = None if allowed else describe_denied(path, cwd=cwd)
    return WriteCheckResponse(path=path, allowed=allowed, message=message)
