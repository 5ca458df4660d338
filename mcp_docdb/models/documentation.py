"""Documentation record models for MCP DocDB."""

import json
from datetime import UTC, datetime
from typing import Any, Dict, List, Literal, Optional, Union

from bson import ObjectId
from pydantic import ConfigDict, Field, field_validator

from .base import DocDBBaseModel, SearchResponse, SearchResult

DEFAULT_VERSION = "latest"


def to_plain(value: Any) -> Any:
    """Recursively replace ObjectIds with their hex string form."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    return value


class Record(DocDBBaseModel):
    """A stored documentation entry.

    ``content`` is whatever JSON the ingestion fetched; it has no fixed shape.
    Field aliases match the stored document keys (``_id``, ``lastUpdated``).
    """

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = Field(default=None, alias="_id", description="Store-assigned identifier")
    technology: str = Field(min_length=1, description="Technology the record documents")
    version: str = Field(default=DEFAULT_VERSION, description="Documented version")
    content: Any = Field(default=None, description="Ingested JSON document")
    tags: List[str] = Field(default_factory=list, description="Record tags")
    last_updated: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        alias="lastUpdated",
        description="Ingestion time",
    )

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Optional[str]:
        return None if value is None else str(value)

    @field_validator("version", mode="before")
    @classmethod
    def _default_version(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
        return value or DEFAULT_VERSION

    @field_validator("content", mode="before")
    @classmethod
    def _plain_content(cls, value: Any) -> Any:
        return to_plain(value)

    @classmethod
    def create(cls, technology: str, content: Any, version: Optional[str] = None) -> "Record":
        """Build a new, not yet stored record."""
        return cls(
            technology=technology,
            version=version,
            content=content,
            tags=[technology],
        )

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Record":
        """Build a record from a raw store document."""
        return cls.model_validate(document)

    def to_document(self) -> Dict[str, Any]:
        """Store representation, without the identifier."""
        return {
            "technology": self.technology,
            "version": self.version,
            "content": self.content,
            "tags": list(self.tags),
            "lastUpdated": self.last_updated,
        }

    def to_json(self) -> Dict[str, Any]:
        """JSON-ready representation with the identifier as plain text."""
        return self.model_dump(mode="json", by_alias=True)

    def preview(self, length: int = 100) -> str:
        """First ``length`` characters of the JSON-encoded content."""
        return json.dumps(self.content, default=str)[:length]


class SearchHit(SearchResult[Record]):
    """A record matched by full-text search, with its text score."""


class DocumentationSearchResponse(SearchResponse[Record]):
    """Response for a full-text documentation search."""

    technology: Optional[str] = Field(default=None, description="Technology scope applied")
    results: List[SearchHit] = Field(default_factory=list, description="Ranked hits")


class GroupCount(DocDBBaseModel):
    """One bucket of a group-count aggregation."""

    value: Any = Field(alias="_id", description="Value of the grouped field")
    count: int = Field(ge=0, description="Number of records in the group")

    @field_validator("value", mode="before")
    @classmethod
    def _plain_value(cls, value: Any) -> Any:
        return to_plain(value)

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


# Resource address variants


class ById(DocDBBaseModel):
    """Address naming a single record by identifier."""

    kind: Literal["id"] = "id"
    id: str


class ByScope(DocDBBaseModel):
    """Address narrowing records by technology and/or version."""

    kind: Literal["scope"] = "scope"
    technology: Optional[str] = None
    version: Optional[str] = None


class Unscoped(DocDBBaseModel):
    """Address with neither an identifier nor a scope."""

    kind: Literal["unscoped"] = "unscoped"


ResourceAddress = Union[ById, ByScope, Unscoped]
