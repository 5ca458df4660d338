"""Filter fragments for documentation queries."""

from typing import Any, Dict, Mapping, Optional

TEXT_INDEX_FIELDS = ["technology", "content.title", "content.description"]


def build_scope_filter(
    technology: Optional[str] = None,
    version: Optional[str] = None,
) -> Dict[str, Any]:
    """Equality filter for the given scope; ``{}`` matches everything."""
    scope: Dict[str, Any] = {}
    if technology:
        scope["technology"] = technology
    if version:
        scope["version"] = version
    return scope


def build_text_filter(query: str) -> Dict[str, Any]:
    """Full-text predicate over the collection's text index."""
    return {"$text": {"$search": query}}


def combine_filters(*fragments: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """AND filter fragments together.

    Disjoint fragments are merged into one mapping. When two fragments share
    a key the result falls back to an explicit ``$and``.
    """
    parts = [dict(fragment) for fragment in fragments if fragment]
    if not parts:
        return {}

    merged: Dict[str, Any] = {}
    for part in parts:
        if merged.keys() & part.keys():
            return {"$and": parts}
        merged.update(part)
    return merged
