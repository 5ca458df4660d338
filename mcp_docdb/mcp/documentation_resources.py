"""Documentation-related MCP resources."""

from typing import Any, Awaitable

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ResourceError

from ..config.logging import LoggerMixin
from ..store import DocumentationStore
from ..store.resources import RESOURCE_NAME, address_from_segments
from .responses import format_content, render_json, run_operation

RESOURCE_SCHEME = "docs"
SCHEMA_URI = f"{RESOURCE_SCHEME}://database.schema"
CONTENT_URI = f"{RESOURCE_SCHEME}://{RESOURCE_NAME}"


class DocumentationResources(LoggerMixin):
    """Schema and content resources.

    ``documentation.content`` takes up to three positional segments
    (id, technology, version); use ``-`` to skip one, e.g.
    ``docs://documentation.content/-/react/18``.
    """

    def __init__(self, mcp: FastMCP, store: DocumentationStore):
        self.mcp = mcp
        self.store = store
        self._register_resources()

    async def _read(self, operation: str, awaitable: Awaitable[Any]) -> Any:
        result = await run_operation(operation, awaitable, self.logger)
        if not result.success:
            raise ResourceError(result.message)
        return result.data

    async def read_content(self, id=None, technology=None, version=None) -> str:
        """Resolve segments to a record, a record list or guidance text."""
        address = address_from_segments(id, technology, version)
        result = await self._read("documentation.content", self.store.resolve_content(address))
        return format_content(result)

    def _register_resources(self) -> None:
        """Register resources with FastMCP server."""

        @self.mcp.resource(
            SCHEMA_URI,
            name="database.schema",
            description="Collections and the top-level fields sampled from each",
            mime_type="application/json",
        )
        async def database_schema() -> str:
            schema = await self._read("database.schema", self.store.describe_schema())
            return render_json(schema)

        @self.mcp.resource(
            CONTENT_URI,
            name="documentation.content",
            description="Usage hint for documentation content lookups",
            mime_type="text/plain",
        )
        async def documentation_content() -> str:
            return await self.read_content()

        @self.mcp.resource(
            CONTENT_URI + "/{id}",
            name="documentation.content.by_id",
            description="One documentation record by ID",
            mime_type="application/json",
        )
        async def documentation_by_id(id: str) -> str:
            return await self.read_content(id)

        @self.mcp.resource(
            CONTENT_URI + "/{id}/{technology}",
            name="documentation.content.by_technology",
            description="Record by ID, or up to 10 records of a technology when ID is '-'",
            mime_type="application/json",
        )
        async def documentation_by_technology(id: str, technology: str) -> str:
            return await self.read_content(id, technology)

        @self.mcp.resource(
            CONTENT_URI + "/{id}/{technology}/{version}",
            name="documentation.content.by_version",
            description="Record by ID, or up to 10 records of a technology/version when ID is '-'",
            mime_type="application/json",
        )
        async def documentation_by_version(id: str, technology: str, version: str) -> str:
            return await self.read_content(id, technology, version)
