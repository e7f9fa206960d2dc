"""Module for Jira comment operations."""

import logging

from ..models.jira import text_to_adf
from .client import JiraClient

logger = logging.getLogger("mcp-jira-tasks.jira")


class CommentsMixin(JiraClient):
    """Mixin for Jira comment operations."""

    def add_comment(self, issue_key: str, comment: str) -> str | None:
        """Add a comment to an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            comment: Plain text comment, sent as an ADF document

        Returns:
            The id of the created comment, None if Jira did not return one

        Raises:
            Exception: Any transport or API error, unwrapped
        """
        result = self.jira.post(
            self._api_path(f"issue/{issue_key}/comment"),
            data={"body": text_to_adf(comment)},
        )
        if not isinstance(result, dict) or result.get("id") is None:
            return None
        return str(result["id"])

    def update_task_progress(
        self, issue_key: str, progress_percent: float, comment: str | None = None
    ) -> str:
        """Record progress on an issue as a comment.

        Jira has no writable progress field for this, so the percentage is
        appended to the issue's comments.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            progress_percent: Progress percentage (0-100)
            comment: Optional note appended to the progress comment

        Returns:
            Confirmation text

        Raises:
            JiraOperationError: If the comment could not be added
        """
        body = f"Progress updated to {progress_percent:g}%"
        if comment:
            body += f" - {comment}"

        try:
            comment_id = self.add_comment(issue_key, body)
        except Exception as e:
            raise self._operation_error(
                "update_task_progress", "Failed to update task progress", e
            ) from e

        logger.info(f"Recorded progress of {issue_key} in comment {comment_id}")

        text = f"✅ Successfully updated progress of {issue_key} to {progress_percent:g}%"
        if comment:
            text += f"\n\n**Comment:** {comment}"
        text += f"\n\nView at: {self.config.browse_url(issue_key)}"
        return text
