"""Module for Jira transition operations."""

import logging
from typing import Any

from ..models.jira import JiraTransition, text_to_adf
from .constants import AUTO_ASSIGN_STATUSES
from .issues import IssuesMixin
from .users import AutoAssignResult, UsersMixin

logger = logging.getLogger("mcp-jira-tasks.jira")


class TransitionsMixin(IssuesMixin, UsersMixin):
    """Mixin for Jira transition operations."""

    def get_transitions(self, issue_key: str) -> list[JiraTransition]:
        """
        Get the available status transitions for an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            List of JiraTransition models

        Raises:
            Exception: Any transport or API error, unwrapped
        """
        transitions_data = self.jira.get(
            self._api_path(f"issue/{issue_key}/transitions")
        )

        # The API returns transitions inside a 'transitions' key
        transitions: Any = []
        if isinstance(transitions_data, dict):
            transitions = transitions_data.get("transitions") or []
        elif isinstance(transitions_data, list):
            transitions = transitions_data

        return [
            JiraTransition.from_api_response(transition)
            for transition in transitions
            if isinstance(transition, dict)
        ]

    def transition_issue(
        self, issue_key: str, transition_id: str, comment: str | None = None
    ) -> None:
        """
        Execute a transition, optionally commenting in the same call.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            transition_id: The ID of the transition to perform
            comment: Optional plain text comment, sent as an ADF document

        Raises:
            Exception: Any transport or API error, unwrapped
        """
        transition_data: dict[str, Any] = {"transition": {"id": transition_id}}
        if comment:
            transition_data["update"] = {
                "comment": [{"add": {"body": text_to_adf(comment)}}]
            }

        logger.info(
            f"Transitioning issue {issue_key} with transition ID {transition_id}"
        )
        self.jira.post(
            self._api_path(f"issue/{issue_key}/transitions"), data=transition_data
        )

    def update_task_status(
        self, issue_key: str, status: str, comment: str | None = None
    ) -> str:
        """
        Move an issue to the status named ``status``.

        The transition leading to the requested status is looked up first;
        the match is case-insensitive. When the issue enters an active work
        status while unassigned it is assigned to the configured account
        after the transition. That assignment is best effort and its failure
        never fails the status update.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            status: Name of the target status (e.g. 'In Progress')
            comment: Optional comment added with the transition

        Returns:
            Confirmation text

        Raises:
            JiraOperationError: If the status is not reachable or any Jira call fails
        """
        try:
            transitions = self.get_transitions(issue_key)
            target = next((t for t in transitions if t.leads_to(status)), None)
            if target is None:
                available = ", ".join(t.to_status for t in transitions)
                msg = f'Status "{status}" not available. Available statuses: {available}'
                raise ValueError(msg)

            should_auto_assign = False
            if status.lower() in AUTO_ASSIGN_STATUSES:
                should_auto_assign = not self.get_issue(issue_key).is_assigned

            self.transition_issue(issue_key, target.id, comment)
        except Exception as e:
            raise self._operation_error(
                "update_task_status", "Failed to update task status", e
            ) from e

        assignment: AutoAssignResult | None = None
        if should_auto_assign:
            assignment = self.auto_assign_to_self(issue_key)
            if not assignment.assigned:
                logger.warning(
                    f"Failed to auto-assign task {issue_key}: {assignment.error}"
                )

        text = f'✅ Successfully updated status of {issue_key} to "{status}"'
        if comment:
            text += f"\n\n**Comment:** {comment}"
        if assignment is not None and assignment.assigned:
            text += f"\n\n**Auto-assigned to:** {assignment.assignee}"
        text += f"\n\nView at: {self.config.browse_url(issue_key)}"
        return text
