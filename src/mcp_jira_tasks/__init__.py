import asyncio
import os
import sys

import click
from dotenv import load_dotenv

__version__ = "1.0.0"

from .exceptions import JiraConfigurationError
from .logging_config import log_operation, setup_logger


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse"]),
    default="stdio",
    help="Transport type (stdio or sse)",
)
@click.option(
    "--port",
    default=8000,
    help="Port to listen on for SSE transport",
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
@click.option(
    "--jira-url",
    help="Jira URL (e.g., https://your-domain.atlassian.net)",
)
@click.option("--jira-email", help="Jira account email")
@click.option("--jira-token", help="Jira API token")
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=None,
    help="Verify SSL certificates (default: verify)",
)
@click.option(
    "--jira-timeout",
    type=float,
    help="Timeout in seconds for Jira API calls",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str,
    port: int,
    log_dir: str | None,
    log_to_file: bool,
    jira_url: str | None,
    jira_email: str | None,
    jira_token: str | None,
    jira_ssl_verify: bool | None,
    jira_timeout: float | None,
) -> None:
    """MCP Jira Tasks Server - Jira task tools for MCP

    Requires JIRA_BASE_URL, JIRA_EMAIL and JIRA_API_TOKEN, from the
    environment, a .env file or the matching options.
    """
    logging_level = None
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    app_logger = setup_logger(
        level=logging_level,
        log_to_file=log_to_file,
        log_dir=log_dir,
    )

    with log_operation(app_logger, "application_startup", app_version=__version__):
        # Load environment variables from file if specified, otherwise try default .env
        if env_file:
            app_logger.info(f"Loading environment from file: {env_file}")
            load_dotenv(env_file)
        else:
            app_logger.debug("Attempting to load environment from default .env file")
            load_dotenv()

        # Command line arguments take precedence over the environment
        if jira_url:
            os.environ["JIRA_BASE_URL"] = jira_url
        if jira_email:
            os.environ["JIRA_EMAIL"] = jira_email
        if jira_token:
            os.environ["JIRA_API_TOKEN"] = jira_token
        if jira_ssl_verify is not None:
            os.environ["JIRA_SSL_VERIFY"] = str(jira_ssl_verify).lower()
        if jira_timeout is not None:
            os.environ["JIRA_TIMEOUT"] = str(jira_timeout)
        if log_dir:
            os.environ["LOG_DIR"] = log_dir

        from .jira.config import JiraConfig

        # Fail fast: no tool is served without a complete configuration
        try:
            JiraConfig.from_env()
        except JiraConfigurationError as e:
            app_logger.error(f"Invalid Jira configuration: {e}")
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    from . import server

    app_logger.info(f"Starting MCP Jira Tasks v{__version__} with {transport} transport")
    asyncio.run(server.run_server(transport=transport, port=port))


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
