"""Module for Jira issue operations."""

import logging
from typing import Any

from ..models.jira import JiraTask, text_to_adf
from .client import JiraClient
from .constants import DEFAULT_ISSUE_TYPE, DEFAULT_PRIORITY

logger = logging.getLogger("mcp-jira-tasks.jira")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    def get_issue(self, issue_key: str) -> JiraTask:
        """
        Fetch a single issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            JiraTask model of the issue

        Raises:
            Exception: Any transport or API error, unwrapped
        """
        issue_data = self.jira.get(self._api_path(f"issue/{issue_key}"))
        if not isinstance(issue_data, dict):
            msg = f"Unexpected response type when fetching issue {issue_key}: {type(issue_data)}"
            raise TypeError(msg)
        return JiraTask.from_api_response(issue_data)

    def create_task(
        self,
        project_key: str,
        summary: str,
        description: str | None = None,
        issue_type: str | None = None,
        priority: str | None = None,
        assignee: str | None = None,
    ) -> str:
        """
        Create a new issue.

        Args:
            project_key: The project key (e.g. 'PROJ')
            summary: Issue summary
            description: Plain text description, sent as an ADF document
            issue_type: Issue type name, "Task" when omitted
            priority: Priority name, "Medium" when omitted
            assignee: Assignee user name

        Returns:
            Confirmation text with the new issue key and a browse link

        Raises:
            JiraOperationError: If the issue could not be created
        """
        issue_type = issue_type or DEFAULT_ISSUE_TYPE
        priority = priority or DEFAULT_PRIORITY

        fields: dict[str, Any] = {
            "project": {"key": project_key},
            "summary": summary,
            "description": text_to_adf(description) if description else "",
            "issuetype": {"name": issue_type},
            "priority": {"name": priority},
        }
        if assignee:
            fields["assignee"] = {"name": assignee}

        try:
            result = self.jira.post(self._api_path("issue"), data={"fields": fields})
            issue_key = result.get("key") if isinstance(result, dict) else None
            if not issue_key:
                msg = f"Jira did not return the key of the created issue: {result}"
                raise ValueError(msg)
        except Exception as e:
            raise self._operation_error(
                "create_task", "Failed to create Jira task", e
            ) from e

        logger.info(f"Created issue {issue_key} in project {project_key}")
        return (
            f"✅ Successfully created Jira task: {issue_key}\n\n"
            f"**Summary:** {summary}\n"
            f"**Project:** {project_key}\n"
            f"**Type:** {issue_type}\n"
            f"**Priority:** {priority}\n\n"
            f"View at: {self.config.browse_url(issue_key)}"
        )

    def get_task(self, issue_key: str) -> str:
        """
        Describe an issue.

        Missing fields fall back to readable defaults: "Unknown" for the
        summary, status, type and project, "Unassigned", "Not set", 0% progress
        and "No description provided".

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            Formatted issue details with a browse link

        Raises:
            JiraOperationError: If the issue could not be fetched
        """
        try:
            task = self.get_issue(issue_key)
        except Exception as e:
            raise self._operation_error("get_task", "Failed to get task", e) from e

        key = task.key or issue_key
        progress = task.progress_percent or 0
        return (
            f"**{key}**: {task.summary or 'Unknown'}\n\n"
            f"**Status:** {task.status or 'Unknown'}\n"
            f"**Assignee:** {task.assignee or 'Unassigned'}\n"
            f"**Priority:** {task.priority or 'Not set'}\n"
            f"**Progress:** {progress:g}%\n"
            f"**Type:** {task.issue_type or 'Unknown'}\n"
            f"**Project:** {task.project_name or task.project_key or 'Unknown'}\n\n"
            f"**Description:**\n{task.description or 'No description provided'}\n\n"
            f"View at: {self.config.browse_url(key)}"
        )
