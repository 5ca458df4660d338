"""
MCP DocDB - A documentation knowledge base served over MCP.

This package provides an MCP (Model Context Protocol) server with:
- MongoDB-backed storage of ingested JSON documentation
- Relevance-ranked full-text search and fuzzy field matching
- Injection-safe group-count aggregation
- Templated resources for schema and record retrieval
"""

__version__ = "1.0.0"
__author__ = "MCP DocDB Team"

from .core.server import DocDBServer
from .config.settings import Settings

__all__ = ["DocDBServer", "Settings"]
