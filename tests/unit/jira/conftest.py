"""
Test fixtures for Jira unit tests.

The Jira transport is replaced with a MagicMock so every REST call made by
the fetcher can be scripted and asserted.
"""

from unittest.mock import MagicMock, patch

import pytest

from mcp_jira_tasks.jira import JiraFetcher


@pytest.fixture
def mock_jira():
    """Mock of the atlassian Jira REST client."""
    return MagicMock()


@pytest.fixture
def jira_fetcher(jira_config, mock_jira):
    """JiraFetcher wired to the mocked transport."""
    with patch("mcp_jira_tasks.jira.client.Jira", return_value=mock_jira):
        fetcher = JiraFetcher(config=jira_config)
    assert fetcher.jira is mock_jira
    return fetcher


@pytest.fixture
def route_get(mock_jira):
    """
    Script ``jira.get`` responses by request path.

    Values may be exceptions, which are raised instead of returned.

    Example:
        route_get({"rest/api/3/issue/TEST-1": {...}})
    """

    def _route(responses):
        def _get(path, *args, **kwargs):
            if path not in responses:
                raise AssertionError(f"Unexpected GET {path}")
            response = responses[path]
            if isinstance(response, Exception):
                raise response
            return response

        mock_jira.get.side_effect = _get
        return mock_jira.get

    return _route
