"""Documentation query validation utilities."""

from typing import Any, Dict, Mapping, Optional

from bson import ObjectId

from ...core.exceptions import InvalidIdentifierError, ValidationError


def validate_search_query(query: str) -> None:
    """Validate full-text search query."""
    if not isinstance(query, str):
        raise ValidationError("Search query must be a string", "query")

    if not query.strip():
        raise ValidationError("Search query cannot be empty", "query")

    if len(query) > 1000:
        raise ValidationError("Search query too long (max 1000 characters)", "query")


def validate_limit(limit: Optional[int]) -> None:
    """Validate limit parameter: any positive integer, no upper bound."""
    if limit is None:
        return

    if not isinstance(limit, int) or isinstance(limit, bool):
        raise ValidationError("Limit must be an integer", "limit")

    if limit < 1:
        raise ValidationError("Limit must be positive", "limit")


def validate_technology(technology: Optional[str], required: bool = False) -> None:
    """Validate a technology name."""
    if technology is None:
        if required:
            raise ValidationError("Technology is required", "technology")
        return

    if not isinstance(technology, str) or not technology.strip():
        raise ValidationError("Technology must be a non-empty string", "technology")


def validate_fuzzy_term(term: str) -> None:
    """Validate a fuzzy search term."""
    if not isinstance(term, str) or not term:
        raise ValidationError("Fuzzy search term cannot be empty", "term")

    if len(term) > 200:
        raise ValidationError("Fuzzy search term too long (max 200 characters)", "term")


def validate_filter(filter: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Validate an aggregation match predicate and return it as a dict.

    Only the shape is checked; values are passed to the store as-is.
    """
    if filter is None:
        return {}

    if not isinstance(filter, Mapping):
        raise ValidationError("Filter must be an object", "filter")

    for key in filter:
        if not isinstance(key, str):
            raise ValidationError("Filter keys must be strings", "filter")

    return dict(filter)


def validate_record_id(record_id: str) -> ObjectId:
    """Validate a record identifier and convert it for the store."""
    if not isinstance(record_id, str) or not ObjectId.is_valid(record_id):
        raise InvalidIdentifierError(str(record_id))
    return ObjectId(record_id)
