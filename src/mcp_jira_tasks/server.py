import asyncio
import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

from mcp.server import Server
from mcp.types import TextContent, Tool

from .jira import JiraFetcher
from .jira.config import JiraConfig
from .jira.constants import DEFAULT_ISSUE_TYPE, DEFAULT_MAX_RESULTS, DEFAULT_PRIORITY
from .logging_config import log_operation
from .models.tools import (
    CreateTaskRequest,
    GetTaskRequest,
    ListTasksRequest,
    ToolRequest,
    UpdateTaskProgressRequest,
    UpdateTaskStatusRequest,
)
from .utils.logging import log_config_param

# Configure logging
logger = logging.getLogger("mcp-jira-tasks.server")


@dataclass
class AppContext:
    """Application context for MCP Jira Tasks."""

    jira: JiraFetcher


@dataclass(frozen=True)
class ToolBinding:
    """Links a tool descriptor to its argument model and Jira operation."""

    tool: Tool
    request_model: type[ToolRequest]
    operation: str

    def invoke(self, jira: JiraFetcher, arguments: Any) -> str:
        """Validate the arguments and run the bound operation."""
        request = self.request_model.from_arguments(self.tool.name, arguments)
        return getattr(jira, self.operation)(**request.model_dump())


ISSUE_KEY_PROPERTY = {
    "type": "string",
    "description": 'The issue key (e.g., "PROJ-123")',
}

JIRA_TOOLS: tuple[ToolBinding, ...] = (
    ToolBinding(
        tool=Tool(
            name="create_task",
            description="Create a new Jira task/issue",
            inputSchema={
                "type": "object",
                "properties": {
                    "projectKey": {
                        "type": "string",
                        "description": 'The project key (e.g., "PROJ")',
                    },
                    "summary": {
                        "type": "string",
                        "description": "The task summary/title",
                    },
                    "description": {
                        "type": "string",
                        "description": "The task description",
                    },
                    "issueType": {
                        "type": "string",
                        "description": 'The type of issue (e.g., "Task", "Bug", "Story")',
                        "default": DEFAULT_ISSUE_TYPE,
                    },
                    "priority": {
                        "type": "string",
                        "description": 'The priority level (e.g., "High", "Medium", "Low")',
                        "default": DEFAULT_PRIORITY,
                    },
                    "assignee": {
                        "type": "string",
                        "description": "The assignee user name (optional)",
                    },
                },
                "required": ["projectKey", "summary"],
            },
        ),
        request_model=CreateTaskRequest,
        operation="create_task",
    ),
    ToolBinding(
        tool=Tool(
            name="update_task_status",
            description=(
                "Update the status of a Jira task. Moving an unassigned task to "
                "In Progress, Scoping or To Do assigns it to the configured account."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "issueKey": ISSUE_KEY_PROPERTY,
                    "status": {
                        "type": "string",
                        "description": 'The new status (e.g., "In Progress", "Done", "To Do")',
                    },
                    "comment": {
                        "type": "string",
                        "description": "Optional comment to add with the status change",
                    },
                },
                "required": ["issueKey", "status"],
            },
        ),
        request_model=UpdateTaskStatusRequest,
        operation="update_task_status",
    ),
    ToolBinding(
        tool=Tool(
            name="update_task_progress",
            description="Record the progress of a Jira task as a comment",
            inputSchema={
                "type": "object",
                "properties": {
                    "issueKey": ISSUE_KEY_PROPERTY,
                    "progressPercent": {
                        "type": "number",
                        "description": "Progress percentage (0-100)",
                        "minimum": 0,
                        "maximum": 100,
                    },
                    "comment": {
                        "type": "string",
                        "description": "Optional comment about the progress update",
                    },
                },
                "required": ["issueKey", "progressPercent"],
            },
        ),
        request_model=UpdateTaskProgressRequest,
        operation="update_task_progress",
    ),
    ToolBinding(
        tool=Tool(
            name="get_task",
            description="Get details of a Jira task",
            inputSchema={
                "type": "object",
                "properties": {
                    "issueKey": ISSUE_KEY_PROPERTY,
                },
                "required": ["issueKey"],
            },
        ),
        request_model=GetTaskRequest,
        operation="get_task",
    ),
    ToolBinding(
        tool=Tool(
            name="list_tasks",
            description="List Jira tasks with optional filtering, most recently updated first",
            inputSchema={
                "type": "object",
                "properties": {
                    "projectKey": {
                        "type": "string",
                        "description": "The project key to filter by (optional)",
                    },
                    "status": {
                        "type": "string",
                        "description": "Filter by status (optional)",
                    },
                    "assignee": {
                        "type": "string",
                        "description": "Filter by assignee (optional)",
                    },
                    "maxResults": {
                        "type": "number",
                        "description": "Maximum number of results to return",
                        "minimum": 0,
                        "default": DEFAULT_MAX_RESULTS,
                    },
                },
            },
        ),
        request_model=ListTasksRequest,
        operation="list_tasks",
    ),
)

TOOL_BINDINGS: dict[str, ToolBinding] = {
    binding.tool.name: binding for binding in JIRA_TOOLS
}


def log_jira_config(config: JiraConfig) -> None:
    """Log the Jira connection settings with the API token masked."""
    log_config_param(logger, "Jira", "URL", config.url)
    log_config_param(logger, "Jira", "Email", config.email)
    log_config_param(logger, "Jira", "API Token", config.api_token, sensitive=True)
    log_config_param(logger, "Jira", "SSL Verify", str(config.ssl_verify))
    log_config_param(logger, "Jira", "Timeout", f"{config.timeout:g}s")


@asynccontextmanager
async def server_lifespan(server: Server) -> AsyncIterator[AppContext]:
    """Initialize and clean up application resources.

    Raises:
        JiraConfigurationError: If the Jira connection settings are incomplete,
            before any tool is served.
    """
    logger.info("Starting MCP Jira Tasks server")
    config = JiraConfig.from_env()
    log_jira_config(config)

    jira = JiraFetcher(config=config)
    logger.info("Jira client initialized successfully.")
    try:
        yield AppContext(jira=jira)
    finally:
        logger.info("MCP Jira Tasks server shutting down")


# Create server instance
app = Server("mcp-jira-tasks", lifespan=server_lifespan)


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List the Jira task tools."""
    return [binding.tool for binding in JIRA_TOOLS]


@app.call_tool(validate_input=False)
async def call_tool(name: str, arguments: Any) -> Sequence[TextContent]:
    """Handle tool calls for Jira task operations.

    Every call ends in text content: unknown tools and failures are reported
    as text rather than raised to the MCP session.
    """
    binding = TOOL_BINDINGS.get(name)
    if binding is None:
        logger.warning(f"Unknown tool requested: {name}")
        return [TextContent(type="text", text=f"Unknown tool: {name}")]

    try:
        with log_operation(logger, "call_tool", tool=name):
            ctx: AppContext = app.request_context.lifespan_context
            logger.debug(f"Arguments for {name}: {arguments}")
            # Jira calls block; run them off the event loop
            text = await asyncio.to_thread(binding.invoke, ctx.jira, arguments)
    except Exception as e:
        return [TextContent(type="text", text=f"Error: {str(e)}")]

    return [TextContent(type="text", text=text)]


async def run_server(transport: str = "stdio", port: int = 8000) -> None:
    """Run the MCP Jira Tasks server with the specified transport."""
    if transport == "sse":
        from mcp.server.sse import SseServerTransport
        from starlette.applications import Starlette
        from starlette.requests import Request
        from starlette.responses import Response
        from starlette.routing import Mount, Route

        sse = SseServerTransport("/messages/")

        async def handle_sse(request: Request) -> Response:
            async with sse.connect_sse(
                request.scope, request.receive, request._send
            ) as streams:
                await app.run(
                    streams[0], streams[1], app.create_initialization_options()
                )
            return Response()

        starlette_app = Starlette(
            routes=[
                Route("/sse", endpoint=handle_sse),
                Mount("/messages/", app=sse.handle_post_message),
            ],
        )

        import uvicorn

        # Set up uvicorn config
        config = uvicorn.Config(starlette_app, host="0.0.0.0", port=port)  # noqa: S104
        server = uvicorn.Server(config)
        # Use server.serve() instead of run() to stay in the same event loop
        await server.serve()
    else:
        from mcp.server.stdio import stdio_server

        async with stdio_server() as (read_stream, write_stream):
            await app.run(
                read_stream, write_stream, app.create_initialization_options()
            )
