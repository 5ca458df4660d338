"""Full-text search operations handler for the documentation store."""

from typing import Optional

from pymongo.errors import OperationFailure

from ..config.settings import Settings
from ..core.exceptions import IndexUnavailableError, QueryFailedError
from ..models.documentation import DocumentationSearchResponse, Record, SearchHit
from ..utils.validation import validate_limit, validate_search_query
from .filters import TEXT_INDEX_FIELDS, build_scope_filter, build_text_filter, combine_filters

# MongoDB error code for IndexNotFound
INDEX_NOT_FOUND_CODE = 27

SCORE_PROJECTION = {"score": {"$meta": "textScore"}}
SCORE_SORT = [("score", {"$meta": "textScore"})]


def is_missing_text_index(error: Exception) -> bool:
    """Whether a store error means the text index does not exist."""
    if isinstance(error, OperationFailure) and error.code == INDEX_NOT_FOUND_CODE:
        return True
    return "text index required" in str(error)


class SearchOperations:
    """Handles relevance-ranked full-text search."""

    def __init__(self, collection, settings: Settings, logger):
        self.collection = collection
        self.settings = settings
        self.logger = logger

    async def search(
        self,
        query: str,
        technology: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> DocumentationSearchResponse:
        """Search records by text relevance, optionally scoped to a technology."""
        validate_search_query(query)
        if limit is None:
            limit = self.settings.DEFAULT_SEARCH_LIMIT
        validate_limit(limit)

        query_filter = combine_filters(
            build_scope_filter(technology),
            build_text_filter(query),
        )

        try:
            cursor = (
                self.collection.find(query_filter, SCORE_PROJECTION)
                .sort(SCORE_SORT)
                .limit(limit)
            )
            documents = await cursor.to_list(length=limit)

        except Exception as e:
            if is_missing_text_index(e):
                self.logger.warning("Text index missing", collection=self.settings.MONGODB_COLLECTION)
                raise IndexUnavailableError(TEXT_INDEX_FIELDS) from e

            self.logger.error("Failed to search documentation", query=query, error=str(e))
            raise QueryFailedError(f"Failed to search documentation: {e}", "search") from e

        # Hits leave in non-increasing score order
        documents = sorted(
            documents[:limit],
            key=lambda document: float(document.get("score") or 0.0),
            reverse=True,
        )

        hits = [
            SearchHit(
                item=Record.from_document(document),
                score=float(document.get("score") or 0.0),
                rank=rank,
            )
            for rank, document in enumerate(documents, start=1)
        ]

        self.logger.info(
            "Documentation search completed",
            query=query,
            technology=technology,
            results=len(hits),
        )
        return DocumentationSearchResponse(
            query=query,
            technology=technology or None,
            limit=limit,
            results=hits,
        )
