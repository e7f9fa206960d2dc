"""Jira API module for MCP Jira Tasks.

This module provides the JiraFetcher used by the task tools, combining the
operation mixins over a shared authenticated client.
"""

from .client import JiraClient
from .comments import CommentsMixin
from .config import JiraConfig
from .issues import IssuesMixin
from .search import SearchMixin, build_task_jql
from .transitions import TransitionsMixin
from .users import AutoAssignResult, UsersMixin


class JiraFetcher(
    TransitionsMixin,
    IssuesMixin,
    UsersMixin,
    CommentsMixin,
    SearchMixin,
):
    """
    The main Jira client class providing the task operations.

    Each public operation returns human-readable text and raises
    JiraOperationError on failure.
    """

    pass


__all__ = [
    "AutoAssignResult",
    "JiraClient",
    "JiraConfig",
    "JiraFetcher",
    "build_task_jql",
]
