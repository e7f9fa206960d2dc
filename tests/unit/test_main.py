"""Tests for the command line entry point."""

import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from click.testing import CliRunner

from mcp_jira_tasks import main

JIRA_ENV_VARS = (
    "JIRA_BASE_URL",
    "JIRA_EMAIL",
    "JIRA_API_TOKEN",
    "JIRA_SSL_VERIFY",
    "JIRA_TIMEOUT",
    "LOG_DIR",
)


def isolate_jira_env(monkeypatch):
    """Remove the Jira settings so that later writes are undone as well.

    ``delenv`` records nothing for an unset variable, and the CLI writes
    straight to ``os.environ``. Setting each variable first makes monkeypatch
    restore its original state whether or not it existed.
    """
    for name in JIRA_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def clean_env(monkeypatch):
    """Start without Jira settings; values set by the CLI are undone afterwards."""
    isolate_jira_env(monkeypatch)


@pytest.fixture
def mock_startup():
    """Patch logging setup, .env loading and the server loop."""
    with (
        patch("mcp_jira_tasks.setup_logger", return_value=MagicMock()) as mock_logger,
        patch("mcp_jira_tasks.load_dotenv") as mock_load_dotenv,
        patch("mcp_jira_tasks.server.run_server", new_callable=AsyncMock) as mock_run,
    ):
        yield {
            "setup_logger": mock_logger,
            "load_dotenv": mock_load_dotenv,
            "run_server": mock_run,
        }


def test_missing_configuration_exits(clean_env, mock_startup):
    result = CliRunner().invoke(main, [])

    assert result.exit_code == 1
    assert "Missing required environment variables" in result.output
    mock_startup["run_server"].assert_not_called()


def test_invalid_timeout_exits(clean_env, mock_startup):
    result = CliRunner().invoke(
        main,
        [
            "--jira-url",
            "https://test.atlassian.net",
            "--jira-email",
            "dev@example.com",
            "--jira-token",
            "test_token",
            "--jira-timeout",
            "0",
        ],
    )

    assert result.exit_code == 1
    assert "JIRA_TIMEOUT must be positive" in result.output


def test_cli_options_configure_and_start_stdio(clean_env, mock_startup):
    result = CliRunner().invoke(
        main,
        [
            "--jira-url",
            "https://test.atlassian.net",
            "--jira-email",
            "dev@example.com",
            "--jira-token",
            "test_token",
            "--no-jira-ssl-verify",
        ],
    )

    assert result.exit_code == 0, result.output
    assert os.environ["JIRA_BASE_URL"] == "https://test.atlassian.net"
    assert os.environ["JIRA_SSL_VERIFY"] == "false"
    mock_startup["load_dotenv"].assert_called_once_with()
    mock_startup["run_server"].assert_awaited_once_with(transport="stdio", port=8000)


def test_sse_transport_and_verbosity(clean_env, mock_startup, monkeypatch):
    monkeypatch.setenv("JIRA_BASE_URL", "https://test.atlassian.net")
    monkeypatch.setenv("JIRA_EMAIL", "dev@example.com")
    monkeypatch.setenv("JIRA_API_TOKEN", "test_token")

    result = CliRunner().invoke(main, ["--transport", "sse", "--port", "9000", "-vv"])

    assert result.exit_code == 0, result.output
    mock_startup["setup_logger"].assert_called_once_with(
        level="DEBUG", log_to_file=False, log_dir=None
    )
    mock_startup["run_server"].assert_awaited_once_with(transport="sse", port=9000)


def test_env_file_is_loaded(clean_env, mock_startup, tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("JIRA_BASE_URL=https://test.atlassian.net\n")
    monkeypatch.setenv("JIRA_BASE_URL", "https://test.atlassian.net")
    monkeypatch.setenv("JIRA_EMAIL", "dev@example.com")
    monkeypatch.setenv("JIRA_API_TOKEN", "test_token")

    result = CliRunner().invoke(main, ["--env-file", str(env_file)])

    assert result.exit_code == 0, result.output
    mock_startup["load_dotenv"].assert_called_once_with(str(env_file))


def test_cli_environment_writes_are_undone(mock_startup):
    before = {name: os.environ.get(name) for name in JIRA_ENV_VARS}

    with pytest.MonkeyPatch.context() as monkeypatch:
        isolate_jira_env(monkeypatch)
        result = CliRunner().invoke(
            main,
            [
                "--jira-url",
                "https://test.atlassian.net",
                "--jira-email",
                "dev@example.com",
                "--jira-token",
                "test_token",
                "--jira-timeout",
                "30",
                "--log-dir",
                "/tmp/jira-logs",
            ],
        )
        assert result.exit_code == 0, result.output
        assert os.environ["JIRA_TIMEOUT"] == "30.0"

    assert {name: os.environ.get(name) for name in JIRA_ENV_VARS} == before
