"""Documentation-related MCP tools."""

from typing import Annotated, Any, Awaitable, Dict, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from ..config.logging import LoggerMixin
from ..config.settings import Settings
from ..store import DocumentationStore
from .responses import format_groups, format_records, format_search_response, run_operation


class DocumentationTools(LoggerMixin):
    """Documentation-related MCP tools."""

    def __init__(self, mcp: FastMCP, store: DocumentationStore, settings: Settings):
        self.mcp = mcp
        self.store = store
        self.settings = settings
        self._register_tools()

    async def _call(self, operation: str, awaitable: Awaitable[Any]) -> Any:
        """Run an operation; failures surface to the client as tool errors."""
        result = await run_operation(operation, awaitable, self.logger)
        if not result.success:
            raise ToolError(result.message)
        return result.data

    def _register_tools(self) -> None:
        """Register documentation tools with FastMCP server."""

        @self.mcp.tool(name="search-documentation")
        async def search_documentation(
            query: Annotated[str, Field(description="Full-text query matched against technology, title and description")],
            technology: Annotated[Optional[str], Field(
                description="Only search records of this technology"
            )] = None,
            limit: Annotated[int, Field(
                description="Maximum number of results to return",
                ge=1
            )] = 10,
        ) -> str:
            """Search stored documentation ranked by text relevance.

            Returns:
                Count of matches followed by one numbered preview line per
                record, most relevant first
            """
            self.logger.info("Querying documentation", technology=technology, query=query, limit=limit)
            response = await self._call(
                "search-documentation",
                self.store.search(query=query, technology=technology, limit=limit),
            )
            return format_search_response(response, self.settings.PREVIEW_LENGTH)

        @self.mcp.tool(name="aggregate-documentation")
        async def aggregate_documentation(
            groupBy: Annotated[str, Field(
                description="Field name to group by (e.g., technology, version)"
            )],
            filter: Annotated[Optional[Dict[str, Any]], Field(
                description="Optional MongoDB filter object"
            )] = None,
        ) -> str:
            """Count documentation records per value of a field.

            Returns:
                JSON list of {"_id": value, "count": n}, largest groups first

            Note:
                Field names may only contain letters, digits, underscores and dots.
            """
            self.logger.info("Aggregating documentation", group_by=groupBy, filter=filter)
            groups = await self._call(
                "aggregate-documentation",
                self.store.aggregate(group_by=groupBy, filter=filter),
            )
            return format_groups(groups)

        @self.mcp.tool(name="fuzzy-query")
        async def fuzzy_query(
            term: Annotated[str, Field(description="Characters that must appear in order, gaps allowed")],
            field: Annotated[str, Field(
                description="Field to search within (e.g., technology, content.title)"
            )],
            limit: Annotated[int, Field(
                description="Maximum number of records to return",
                ge=1
            )] = 10,
        ) -> str:
            """Performs a fuzzy search on a specified field.

            Returns:
                JSON list of matching records, unranked
            """
            records = await self._call(
                "fuzzy-query",
                self.store.fuzzy_match(term=term, field=field, limit=limit),
            )
            return format_records(records)

        @self.mcp.tool(name="fetch-documentation")
        async def fetch_documentation(
            url: Annotated[str, Field(description="URL of a JSON documentation document")],
            technology: Annotated[str, Field(description="Technology the document describes")],
            version: Annotated[Optional[str], Field(
                description="Documented version (defaults to 'latest')"
            )] = None,
        ) -> str:
            """Fetch documentation from an external source and store it.

            Note:
                Stored records are never modified afterwards; fetching the
                same URL again creates a new record.
            """
            record = await self._call(
                "fetch-documentation",
                self.store.fetch_documentation(url=url, technology=technology, version=version),
            )
            return f"Documentation for {record.technology} fetched and stored (id: {record.id})"
