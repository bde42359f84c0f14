"""
Pydantic models for API requests and responses.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class CommandInfo(BaseModel):
    """Schema describing one available command."""

    name: str = Field(..., description="Command name")
    description: str = Field(..., description="One-line description")
    usage: str = Field(..., description="Argument grammar")

    @classmethod
    def from_command(cls, command):
        """Create a CommandInfo schema from a shell command."""
        return cls(
            name=command.name, description=command.description, usage=command.usage
        )


class CommandListResponse(BaseModel):
    """Schema for the command list response."""

    commands: List[CommandInfo] = Field(..., description="Available commands")


class CommandRequest(BaseModel):
    """Schema for a command invocation."""

    args: List[str] = Field(default_factory=list, description="Command arguments")
    cwd: Optional[str] = Field(
        None, description="Working directory (defaults to VFS_DEFAULT_CWD)"
    )
    stdin: Optional[str] = Field(None, description="Standard input (unused)")


class CommandResultResponse(BaseModel):
    """Schema for a command result."""

    exit_code: int = Field(..., description="Exit status, 0 on success")
    stdout: str = Field("", description="Standard output")
    stderr: str = Field("", description="Standard error")

    @classmethod
    def from_entity(cls, result):
        """Create a response from a CommandResult entity."""
        return cls(**result.get_details())


class WriteCheckResponse(BaseModel):
    """Schema for a write-permission check."""

    path: str = Field(..., description="Checked path")
    allowed: bool = Field(..., description="Whether writes to the path are allowed")
    message: Optional[str] = Field(
        None, description="Explanation listing the allowed zones when denied"
    )


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
