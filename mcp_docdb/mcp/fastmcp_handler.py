"""FastMCP-based server implementation for MCP DocDB."""

from mcp.server.fastmcp import FastMCP

from ..config.logging import LoggerMixin
from ..config.settings import Settings
from ..store import DocumentationStore
from .documentation_resources import DocumentationResources
from .documentation_tools import DocumentationTools


class FastMCPHandler(LoggerMixin):
    """FastMCP server implementation for MCP DocDB."""

    def __init__(self, store: DocumentationStore, settings: Settings):
        self.store = store
        self.settings = settings

        # Create FastMCP server
        self.mcp = FastMCP(self.settings.MCP_SERVER_NAME)

        # Register tools and resources
        self.documentation_tools = DocumentationTools(self.mcp, self.store, self.settings)
        self.documentation_resources = DocumentationResources(self.mcp, self.store)

        self.logger.info("FastMCP handler initialized", server_name=self.settings.MCP_SERVER_NAME)

    def get_mcp_server(self) -> FastMCP:
        """Get the FastMCP server instance."""
        return self.mcp

    def get_app(self):
        """Get the Starlette app serving MCP over SSE."""
        return self.mcp.sse_app()

    async def run_stdio(self) -> None:
        """Serve MCP over stdin/stdout until the client disconnects."""
        await self.mcp.run_stdio_async()
