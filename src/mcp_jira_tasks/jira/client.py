"""Base client module for Jira API interactions."""

import logging
from typing import Any

from atlassian import Jira

from ..exceptions import JiraOperationError
from .config import JiraConfig
from .constants import API_ROOT, UNKNOWN_ERROR_MESSAGE

# Configure logging
logger = logging.getLogger("mcp-jira-tasks.jira")


class JiraClient:
    """Base client for Jira API interactions."""

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object. If None, will be loaded from environment variables.

        Raises:
            JiraConfigurationError: If configuration is missing or invalid.
        """
        if config is None:
            self.config = JiraConfig.from_env()
        else:
            self.config = config

        # Basic auth: account email as username, API token as password
        self.jira = Jira(
            url=self.config.url,
            username=self.config.email,
            password=self.config.api_token,
            cloud=True,
            verify_ssl=self.config.ssl_verify,
            timeout=self.config.timeout,
        )

    @staticmethod
    def _api_path(resource: str) -> str:
        """Build a Jira REST API v3 path relative to the base URL."""
        return f"{API_ROOT}/{resource.lstrip('/')}"

    @staticmethod
    def _get_error_message(error: BaseException) -> str:
        """Extract the most useful message from a failed call.

        Preference order: the ``errorMessages`` list of the response body,
        then its ``message`` field, then the exception's own message.

        Args:
            error: The exception raised by the transport or by local checks

        Returns:
            Human-readable error message
        """
        response = getattr(error, "response", None)
        body: Any = None
        if response is not None:
            try:
                body = response.json()
            except ValueError:
                body = None

        if isinstance(body, dict):
            error_messages = body.get("errorMessages")
            if error_messages:
                if isinstance(error_messages, list):
                    return ", ".join(str(message) for message in error_messages)
                return str(error_messages)
            if body.get("message"):
                return str(body["message"])

        if str(error):
            return str(error)
        return UNKNOWN_ERROR_MESSAGE

    def _operation_error(
        self, operation: str, prefix: str, error: BaseException
    ) -> JiraOperationError:
        """Wrap a failure into a JiraOperationError tagged with the operation.

        Args:
            operation: Name of the failed operation (e.g. 'create_task')
            prefix: Message prefix describing the failure
            error: The original exception

        Returns:
            The error to raise
        """
        message = f"{prefix}: {self._get_error_message(error)}"
        logger.error(f"{operation} failed: {message}")
        return JiraOperationError(operation, message)
