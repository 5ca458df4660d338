"""
Documentation store backed by MongoDB.

This package provides the query & retrieval engine with:

- **Core Management**: DocumentationStore with client lifecycle and coordination
- **Filters**: Scope and full-text filter fragments
- **Search**: Relevance-ranked full-text search with a result cap
- **Aggregation**: Validated group-count pipelines
- **Fuzzy**: Case-insensitive subsequence matching on one field
- **Resources**: Resolution of templated ``documentation.content`` addresses
- **Schema**: Sampling-based collection schema introspection
- **Documents**: Ingestion of remote JSON and record lookups
"""

from .core import DocumentationStore

__all__ = ["DocumentationStore"]
