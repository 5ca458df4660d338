"""MCP protocol surface: tools and resources."""

from .fastmcp_handler import FastMCPHandler
from .documentation_resources import DocumentationResources
from .documentation_tools import DocumentationTools

__all__ = ["FastMCPHandler", "DocumentationResources", "DocumentationTools"]
