"""Base model classes and generics for MCP DocDB."""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

# Type variables for generics
T = TypeVar('T')


class DocDBBaseModel(BaseModel):
    """Base model with common configuration for all MCP DocDB models."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Validate assignment after model creation
        validate_assignment=True,
        extra='forbid',
    )


class OperationResult(DocDBBaseModel, Generic[T]):
    """Generic result wrapper for operations.

    This is what crosses the MCP boundary: either ``data`` on success, or an
    error flag with a human-readable message and an error code.
    """

    success: bool = Field(description="Whether the operation succeeded")
    data: Optional[T] = Field(default=None, description="Operation result data")
    message: Optional[str] = Field(default=None, description="Success or error message")
    error_code: Optional[str] = Field(default=None, description="Error code if operation failed")


class SearchResult(DocDBBaseModel, Generic[T]):
    """Generic search result with scoring."""

    item: T = Field(description="The matching item")
    score: float = Field(ge=0.0, description="Relevance score, higher is better")
    rank: int = Field(ge=1, description="Result ranking (1-based)")


class SearchResponse(DocDBBaseModel, Generic[T]):
    """Generic response for search operations."""

    query: str = Field(description="Original search query")
    limit: int = Field(ge=1, description="Maximum results requested")
    results: List[SearchResult[T]] = Field(default_factory=list, description="Ranked results")
    total_count: int = Field(ge=0, description="Number of results found")
    max_score: float = Field(default=0.0, description="Highest score in results")

    def __init__(self, **data):
        results = data.get("results") or []
        data.setdefault("total_count", len(results))
        data.setdefault("max_score", max((r.score for r in results), default=0.0))
        super().__init__(**data)
