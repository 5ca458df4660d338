"""MCP DocDB domain models."""

from .base import (
    DocDBBaseModel,
    OperationResult,
    SearchResponse,
    SearchResult,
)
from .documentation import (
    ById,
    ByScope,
    DocumentationSearchResponse,
    GroupCount,
    Record,
    ResourceAddress,
    SearchHit,
    Unscoped,
)

__all__ = [
    # Base models
    "DocDBBaseModel",
    "OperationResult",
    "SearchResult",
    "SearchResponse",

    # Documentation models
    "Record",
    "SearchHit",
    "DocumentationSearchResponse",
    "GroupCount",
    "ById",
    "ByScope",
    "Unscoped",
    "ResourceAddress",
]
