"""Constants shared by the Jira task operations."""

API_ROOT = "rest/api/3"

DEFAULT_ISSUE_TYPE = "Task"
DEFAULT_PRIORITY = "Medium"
DEFAULT_MAX_RESULTS = 50

# Entering one of these statuses auto-assigns an unassigned issue to the
# configured account.
AUTO_ASSIGN_STATUSES = frozenset({"in progress", "scoping", "to do"})

SEARCH_FIELDS = "summary,status,assignee,priority,issuetype,project,updated"

JQL_ORDER_BY = "ORDER BY updated DESC"

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"
