class MCPJiraTasksError(Exception):
    """Base exception for MCP Jira Tasks errors."""

    pass


class JiraConfigurationError(MCPJiraTasksError, ValueError):
    """Raised when required Jira connection settings are missing or invalid."""

    pass


class ToolArgumentError(MCPJiraTasksError, ValueError):
    """Raised when tool arguments do not match the declared input schema."""

    pass


class JiraOperationError(MCPJiraTasksError):
    """Raised when a Jira operation fails, remotely or during local checks."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(message)
        self.operation = operation
