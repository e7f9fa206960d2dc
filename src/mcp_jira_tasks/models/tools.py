"""
Tool argument models.

Each tool's arguments are validated against one of these models before the
Jira client is called. Field aliases are the argument names advertised to
MCP clients, so ``model_dump()`` yields the keyword arguments of the
matching ``JiraFetcher`` method.
"""

import math
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import ToolArgumentError

T = TypeVar("T", bound="ToolRequest")


class ToolRequest(BaseModel):
    """Base model for tool arguments."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    @classmethod
    def from_arguments(cls: type[T], tool_name: str, arguments: Any) -> T:
        """
        Validate raw tool arguments.

        Args:
            tool_name: Name of the tool being invoked, used in error messages
            arguments: The untyped arguments received from the MCP client

        Returns:
            The validated request

        Raises:
            ToolArgumentError: If the arguments violate the tool's input schema
        """
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            raise ToolArgumentError(
                f"Invalid arguments for {tool_name}: expected an object, "
                f"got {type(arguments).__name__}"
            )
        try:
            return cls.model_validate(arguments)
        except ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(part) for part in error['loc']) or 'arguments'}: "
                f"{error['msg']}"
                for error in e.errors()
            )
            raise ToolArgumentError(
                f"Invalid arguments for {tool_name}: {details}"
            ) from e


class CreateTaskRequest(ToolRequest):
    project_key: str = Field(alias="projectKey", min_length=1)
    summary: str = Field(min_length=1)
    description: str | None = None
    issue_type: str | None = Field(default=None, alias="issueType")
    priority: str | None = None
    assignee: str | None = None


class UpdateTaskStatusRequest(ToolRequest):
    issue_key: str = Field(alias="issueKey", min_length=1)
    status: str = Field(min_length=1)
    comment: str | None = None


class UpdateTaskProgressRequest(ToolRequest):
    issue_key: str = Field(alias="issueKey", min_length=1)
    progress_percent: float = Field(alias="progressPercent", ge=0, le=100)
    comment: str | None = None


class GetTaskRequest(ToolRequest):
    issue_key: str = Field(alias="issueKey", min_length=1)


class ListTasksRequest(ToolRequest):
    project_key: str | None = Field(default=None, alias="projectKey")
    status: str | None = None
    assignee: str | None = None
    max_results: int | None = Field(default=None, alias="maxResults", ge=0)

    @field_validator("max_results", mode="before")
    @classmethod
    def truncate_fraction(cls, value: Any) -> Any:
        # maxResults is advertised as a JSON number; 25.5 means 25
        if isinstance(value, float) and math.isfinite(value):
            return int(value)
        return value
