"""Module for Jira user operations."""

import logging
from dataclasses import dataclass

from .client import JiraClient

logger = logging.getLogger("mcp-jira-tasks.jira")


@dataclass(frozen=True)
class AutoAssignResult:
    """Outcome of the best-effort auto-assignment of an issue."""

    assigned: bool
    assignee: str | None = None
    error: str | None = None


class UsersMixin(JiraClient):
    """Mixin for Jira user operations."""

    def find_account_id(self, query: str) -> str | None:
        """Look up a user's account ID.

        Args:
            query: Email address or name to search for

        Returns:
            The accountId of the first matching user, or None if there is no match

        Raises:
            Exception: Any transport or API error, unwrapped
        """
        users = self.jira.get(self._api_path("user/search"), params={"query": query})
        if not isinstance(users, list) or not users:
            return None
        first = users[0]
        if not isinstance(first, dict):
            return None
        return first.get("accountId") or None

    def assign_issue(self, issue_key: str, account_id: str) -> None:
        """Assign an issue to an account.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            account_id: The accountId of the new assignee

        Raises:
            Exception: Any transport or API error, unwrapped
        """
        self.jira.put(
            self._api_path(f"issue/{issue_key}/assignee"),
            data={"accountId": account_id},
        )

    def auto_assign_to_self(self, issue_key: str) -> AutoAssignResult:
        """Assign an issue to the configured account, never raising.

        Failures are captured in the returned result so the caller decides
        how to report them.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            AutoAssignResult describing whether the assignment happened
        """
        email = self.config.email
        try:
            account_id = self.find_account_id(email)
            if account_id is None:
                return AutoAssignResult(
                    assigned=False, error=f"No Jira account found for {email}"
                )
            self.assign_issue(issue_key, account_id)
        except Exception as e:  # noqa: BLE001 - outcome is reported to the caller
            return AutoAssignResult(
                assigned=False, error=self._get_error_message(e)
            )

        logger.info(f"Auto-assigned {issue_key} to {email}")
        return AutoAssignResult(assigned=True, assignee=email)
