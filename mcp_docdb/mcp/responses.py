"""Operation boundary and text rendering for MCP outputs."""

import json
from typing import Any, Awaitable, List, Union

from ..core.exceptions import DocDBError
from ..models.base import OperationResult
from ..models.documentation import DocumentationSearchResponse, GroupCount, Record


async def run_operation(operation: str, awaitable: Awaitable[Any], logger) -> OperationResult:
    """Await an operation and convert any failure into an error result.

    Nothing raised by the engine escapes this function.
    """
    try:
        data = await awaitable
    except DocDBError as e:
        logger.warning(
            "Operation failed",
            operation=operation,
            error_code=e.error_code,
            error=e.message,
        )
        return OperationResult(success=False, message=f"Error: {e.message}", error_code=e.error_code)
    except Exception as e:
        logger.error("Unexpected operation failure", operation=operation, error=str(e), exc_info=True)
        return OperationResult(success=False, message=f"Error: {e}", error_code="INTERNAL_ERROR")

    return OperationResult(success=True, data=data)


def render_json(value: Any) -> str:
    """Pretty-printed JSON with non-JSON values stringified."""
    return json.dumps(value, indent=2, default=str)


def format_search_response(response: DocumentationSearchResponse, preview_length: int = 100) -> str:
    """Numbered summary of search hits with previews and scores."""
    lines = [
        f"{hit.rank}. {hit.item.technology} {hit.item.version}: "
        f"{hit.item.preview(preview_length)}... (Score: {hit.score})"
        for hit in response.results
    ]
    body = "\n".join(lines) or "No specific content preview available."
    return (
        f'Found {response.total_count} documentation entries matching "{response.query}":\n'
        f"{body}"
    )


def format_groups(groups: List[GroupCount]) -> str:
    return render_json([group.to_json() for group in groups])


def format_records(records: List[Record]) -> str:
    return render_json([record.to_json() for record in records])


def format_content(result: Union[Record, List[Record], str]) -> str:
    """Render a resolved ``documentation.content`` address."""
    if isinstance(result, Record):
        return render_json(result.to_json())
    if isinstance(result, list):
        return format_records(result)
    return result
