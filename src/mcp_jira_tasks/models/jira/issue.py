"""
Jira issue models.

This module provides Pydantic models for the parts of Jira issues,
transitions and search results that the task tools read.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel
from .adf import adf_to_text

logger = logging.getLogger("mcp-jira-tasks.models")


def _nested(fields: dict[str, Any], name: str, attribute: str) -> Any:
    """Read ``fields[name][attribute]``, tolerating absent or null objects."""
    value = fields.get(name)
    if not isinstance(value, dict):
        return None
    return value.get(attribute)


class JiraTask(ApiModel):
    """
    Model representing a Jira issue as shown by the task tools.

    Every field except the key is optional because Jira omits fields
    that are unset or not requested.
    """

    key: str = ""
    summary: str | None = None
    description: str | None = None
    status: str | None = None
    assignee: str | None = None
    assignee_account_id: str | None = None
    priority: str | None = None
    issue_type: str | None = None
    project_key: str | None = None
    project_name: str | None = None
    progress_percent: float | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraTask":
        """
        Create a JiraTask from a Jira API response.

        Args:
            data: The issue data from the Jira API
            **kwargs: Unused

        Returns:
            A JiraTask instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received non-dictionary issue data, returning default")
            return cls()

        fields = data.get("fields") or {}

        description = fields.get("description")
        if isinstance(description, dict | list):
            description = adf_to_text(description)

        return cls(
            key=str(data.get("key", "")),
            summary=fields.get("summary"),
            description=description or None,
            status=_nested(fields, "status", "name"),
            assignee=_nested(fields, "assignee", "displayName"),
            assignee_account_id=_nested(fields, "assignee", "accountId"),
            priority=_nested(fields, "priority", "name"),
            issue_type=_nested(fields, "issuetype", "name"),
            project_key=_nested(fields, "project", "key"),
            project_name=_nested(fields, "project", "name"),
            progress_percent=_nested(fields, "progress", "percent"),
        )

    @property
    def is_assigned(self) -> bool:
        """Whether the issue currently has an assignee."""
        return bool(self.assignee or self.assignee_account_id)


class JiraTransition(ApiModel):
    """Model representing an available workflow transition of an issue."""

    id: str = ""
    name: str = ""
    to_status: str = ""

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraTransition":
        """
        Create a JiraTransition from a Jira API response.

        Args:
            data: One entry of the ``transitions`` list
            **kwargs: Unused

        Returns:
            A JiraTransition instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            id=str(data.get("id", "")),
            name=data.get("name") or "",
            to_status=_nested(data, "to", "name") or "",
        )

    def leads_to(self, status: str) -> bool:
        """Case-insensitively compare the destination status with ``status``."""
        return self.to_status.lower() == status.lower()


class JiraSearchResult(ApiModel):
    """Model representing one page of a Jira (JQL) search.

    The enhanced search endpoint reports no total count, only the issues.
    """

    issues: list[JiraTask] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraSearchResult":
        """
        Create a JiraSearchResult from a Jira API response.

        Args:
            data: The search result data from the Jira API
            **kwargs: Unused

        Returns:
            A JiraSearchResult instance, issues in the order Jira returned them
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received non-dictionary search data, returning default")
            return cls()

        issues = [
            JiraTask.from_api_response(issue_data)
            for issue_data in data.get("issues") or []
            if issue_data
        ]

        return cls(issues=issues)
