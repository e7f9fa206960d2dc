"""Entry point for running the MCP Jira Tasks server."""

from mcp_jira_tasks import main

if __name__ == "__main__":
    main()
