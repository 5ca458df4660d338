"""Utility functions and helpers."""

from .validation import (
    validate_field_name,
    validate_record_id,
    validate_search_query,
    validate_url,
)

__all__ = [
    "validate_field_name",
    "validate_record_id",
    "validate_search_query",
    "validate_url",
]
