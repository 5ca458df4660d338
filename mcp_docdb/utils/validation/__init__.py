"""Validation utilities package.

This package provides validation functions organized by concern:
- fields: Field-name validation for caller strings used as query keys
- documents: Search, aggregation and identifier validation
- common: General validation utilities (URLs)
"""

from .fields import validate_field_name

from .documents import (
    validate_filter,
    validate_fuzzy_term,
    validate_limit,
    validate_record_id,
    validate_search_query,
    validate_technology,
)

from .common import validate_url

__all__ = [
    # Field validation
    "validate_field_name",

    # Document validation
    "validate_search_query",
    "validate_limit",
    "validate_technology",
    "validate_fuzzy_term",
    "validate_filter",
    "validate_record_id",

    # Common validation
    "validate_url",
]
