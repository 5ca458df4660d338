"""Subsequence ("fuzzy") matching over a single record field."""

import re
from typing import Any, Dict, List, Optional

from ..config.settings import Settings
from ..core.exceptions import QueryFailedError
from ..models.documentation import Record
from ..utils.validation import validate_field_name, validate_fuzzy_term, validate_limit


def build_fuzzy_pattern(term: str) -> str:
    """Regex requiring the characters of ``term`` in order, gaps allowed.

    Every character is escaped, so ``a.c`` looks for a literal dot.
    """
    return ".*".join(re.escape(char) for char in term)


def compile_fuzzy_pattern(term: str) -> re.Pattern:
    """Case-insensitive compiled form of :func:`build_fuzzy_pattern`."""
    return re.compile(build_fuzzy_pattern(term), re.IGNORECASE)


def build_fuzzy_filter(term: str, field: str) -> Dict[str, Any]:
    """Store filter applying the fuzzy pattern to ``field``."""
    validate_fuzzy_term(term)
    field = validate_field_name(field, "field")
    return {field: {"$regex": build_fuzzy_pattern(term), "$options": "i"}}


class FuzzyOperations:
    """Handles subsequence matching. Results are filtered, not ranked."""

    def __init__(self, collection, settings: Settings, logger):
        self.collection = collection
        self.settings = settings
        self.logger = logger

    async def fuzzy_match(
        self,
        term: str,
        field: str,
        limit: Optional[int] = None,
    ) -> List[Record]:
        """Find records whose ``field`` contains ``term`` as a subsequence."""
        query_filter = build_fuzzy_filter(term, field)
        if limit is None:
            limit = self.settings.FUZZY_RESULT_LIMIT
        validate_limit(limit)

        self.logger.debug(
            "Performing fuzzy search",
            term=term,
            field=field,
            pattern=query_filter[field]["$regex"],
        )

        try:
            documents = await self.collection.find(query_filter).limit(limit).to_list(length=limit)
        except Exception as e:
            self.logger.error("Fuzzy search failed", term=term, field=field, error=str(e))
            raise QueryFailedError(f"Fuzzy search failed: {e}", "fuzzy_match") from e

        self.logger.info("Fuzzy search completed", term=term, field=field, results=len(documents))
        return [Record.from_document(document) for document in documents[:limit]]
