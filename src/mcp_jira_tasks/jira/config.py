"""Configuration module for Jira API interactions."""

import os
from dataclasses import dataclass

from ..exceptions import JiraConfigurationError

DEFAULT_TIMEOUT = 75

REQUIRED_ENV_VARS = ("JIRA_BASE_URL", "JIRA_EMAIL", "JIRA_API_TOKEN")


@dataclass(frozen=True)
class JiraConfig:
    """Jira API configuration.

    Jira Cloud is reached with basic authentication: the account email is the
    username and the API token is the password. The same email is used to look
    up the account when an issue is auto-assigned.
    """

    url: str  # Base URL for Jira
    email: str  # Account email (basic auth username)
    api_token: str  # API token (basic auth password)
    ssl_verify: bool = True  # Whether to verify SSL certificates
    timeout: float = DEFAULT_TIMEOUT  # Transport timeout in seconds

    def __post_init__(self) -> None:
        object.__setattr__(self, "url", self.url.rstrip("/"))

    def browse_url(self, issue_key: str) -> str:
        """Return the web UI link for an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            URL of the issue in the Jira web interface
        """
        return f"{self.url}/browse/{issue_key}"

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            JiraConfigurationError: If required environment variables are missing or invalid
        """
        missing = [name for name in REQUIRED_ENV_VARS if not os.getenv(name)]
        if missing:
            msg = f"Missing required environment variables: {', '.join(missing)}"
            raise JiraConfigurationError(msg)

        ssl_verify_env = os.getenv("JIRA_SSL_VERIFY", "true").lower()
        ssl_verify = ssl_verify_env not in {"false", "0", "no"}

        timeout_env = os.getenv("JIRA_TIMEOUT")
        try:
            timeout = float(timeout_env) if timeout_env else DEFAULT_TIMEOUT
        except ValueError as e:
            msg = f"JIRA_TIMEOUT must be a number of seconds, got '{timeout_env}'"
            raise JiraConfigurationError(msg) from e
        if timeout <= 0:
            msg = f"JIRA_TIMEOUT must be positive, got '{timeout_env}'"
            raise JiraConfigurationError(msg)

        return cls(
            url=os.environ["JIRA_BASE_URL"],
            email=os.environ["JIRA_EMAIL"],
            api_token=os.environ["JIRA_API_TOKEN"],
            ssl_verify=ssl_verify,
            timeout=timeout,
        )
