"""
Pydantic models for the MCP Jira Tasks server.

Jira response models live in the ``jira`` subpackage; tool argument models
live in ``tools``.
"""

from .base import ApiModel
from .jira import JiraSearchResult, JiraTask, JiraTransition
from .tools import (
    CreateTaskRequest,
    GetTaskRequest,
    ListTasksRequest,
    ToolRequest,
    UpdateTaskProgressRequest,
    UpdateTaskStatusRequest,
)

__all__ = [
    "ApiModel",
    "CreateTaskRequest",
    "GetTaskRequest",
    "JiraSearchResult",
    "JiraTask",
    "JiraTransition",
    "ListTasksRequest",
    "ToolRequest",
    "UpdateTaskProgressRequest",
    "UpdateTaskStatusRequest",
]
