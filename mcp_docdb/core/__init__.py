"""Core server functionality for MCP DocDB."""

from .server import DocDBServer
from .exceptions import DocDBError, ConfigurationError, DatabaseError

__all__ = ["DocDBServer", "DocDBError", "ConfigurationError", "DatabaseError"]
