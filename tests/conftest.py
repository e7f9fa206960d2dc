"""
Root test configuration.

Provides the async backend for anyio-marked tests and the Jira
configuration shared by unit tests.
"""

import pytest

from mcp_jira_tasks.jira.config import JiraConfig


@pytest.fixture
def anyio_backend():
    """Run anyio-marked tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def jira_config_factory():
    """
    Factory for creating JiraConfig instances with customizable options.

    Example:
        def test_config(jira_config_factory):
            config = jira_config_factory(url="https://custom.atlassian.net")
            assert config.url == "https://custom.atlassian.net"
    """

    def _create_config(**overrides):
        defaults = {
            "url": "https://test.atlassian.net",
            "email": "dev@example.com",
            "api_token": "test_token",
        }
        return JiraConfig(**{**defaults, **overrides})

    return _create_config


@pytest.fixture
def jira_config(jira_config_factory):
    """Standard JiraConfig for tests that don't need custom configuration."""
    return jira_config_factory()
