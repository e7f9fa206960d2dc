"""Module for Jira search operations."""

import logging
from urllib.parse import quote

from ..models.jira import JiraSearchResult
from .client import JiraClient
from .constants import DEFAULT_MAX_RESULTS, JQL_ORDER_BY, SEARCH_FIELDS

logger = logging.getLogger("mcp-jira-tasks.jira")


def build_task_jql(
    project_key: str | None = None,
    status: str | None = None,
    assignee: str | None = None,
) -> str:
    """Build the JQL used to list tasks.

    Clauses are added in the order project, status, assignee, each only when
    its value is given, and joined with AND. Results are ordered by last
    update, newest first.

    Args:
        project_key: Project key to filter by
        status: Status name to filter by, quoted in the query
        assignee: Assignee to filter by

    Returns:
        The JQL query string
    """
    clauses = []
    if project_key:
        clauses.append(f"project = {project_key}")
    if status:
        clauses.append(f'status = "{status}"')
    if assignee:
        clauses.append(f"assignee = {assignee}")

    if not clauses:
        return JQL_ORDER_BY
    return f"{' AND '.join(clauses)} {JQL_ORDER_BY}"


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def search_issues(
        self, jql: str, max_results: int = DEFAULT_MAX_RESULTS
    ) -> JiraSearchResult:
        """
        Run a single-page JQL search on the enhanced search endpoint.

        Args:
            jql: JQL query string
            max_results: Maximum number of issues to return

        Returns:
            JiraSearchResult with the issues in the order Jira returned them

        Raises:
            Exception: Any transport or API error, unwrapped
        """
        logger.debug(f"Searching issues with JQL: {jql}")
        response = self.jira.get(
            self._api_path("search/jql"),
            params={
                "jql": jql,
                "maxResults": max_results,
                "fields": SEARCH_FIELDS,
            },
        )
        if not isinstance(response, dict):
            msg = f"Unexpected response type from search: {type(response)}"
            raise TypeError(msg)
        return JiraSearchResult.from_api_response(response)

    def list_tasks(
        self,
        project_key: str | None = None,
        status: str | None = None,
        assignee: str | None = None,
        max_results: int | None = None,
    ) -> str:
        """
        List tasks matching optional filters.

        Args:
            project_key: Project key to filter by
            status: Status name to filter by
            assignee: Assignee to filter by
            max_results: Maximum number of tasks, 50 when omitted

        Returns:
            A bulleted task list with a link to the same search in Jira,
            or a message when nothing matched

        Raises:
            JiraOperationError: If the search fails
        """
        jql = build_task_jql(project_key, status, assignee)
        try:
            result = self.search_issues(jql, max_results or DEFAULT_MAX_RESULTS)
        except Exception as e:
            raise self._operation_error("list_tasks", "Failed to list tasks", e) from e

        if not result.issues:
            return "No tasks found matching the criteria."

        task_list = "\n\n".join(
            f"• **{task.key}**: {task.summary}\n"
            f"  Status: {task.status}, Assignee: {task.assignee or 'Unassigned'}"
            for task in result.issues
        )
        return (
            f"Found {len(result.issues)} task(s):\n\n{task_list}\n\n"
            f"View all at: {self.config.url}/issues/?jql={quote(jql, safe='')}"
        )
