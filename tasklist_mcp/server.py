"""FastMCP server initialization for the task list."""

from mcp.server.fastmcp import FastMCP

# Initialize the MCP server
mcp = FastMCP("tasklist_mcp")


def run() -> None:
    """Configure logging, load state, register tools and run the MCP server."""
    from tasklist_mcp import tools  # noqa: F401  (registers tools)
    from tasklist_mcp.config import load_settings
    from tasklist_mcp.logging_setup import setup_logging
    from tasklist_mcp.state import get_state

    settings = load_settings()
    setup_logging(settings.log_level)
    get_state()
    mcp.run()


if __name__ == "__main__":
    run()
