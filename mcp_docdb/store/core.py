"""Core documentation store with lifecycle management and coordination."""

from typing import Any, Dict, List, Mapping, Optional, Union

from pymongo import TEXT, AsyncMongoClient
from pymongo.errors import OperationFailure

from ..config.logging import LoggerMixin
from ..config.settings import Settings
from ..core.exceptions import ConnectionError, DatabaseError
from ..models.documentation import (
    DocumentationSearchResponse,
    GroupCount,
    Record,
    ResourceAddress,
)
from .aggregation import AggregationOperations
from .documents import DocumentOperations
from .filters import TEXT_INDEX_FIELDS
from .fuzzy import FuzzyOperations
from .resources import ResourceRouter
from .schema import SchemaOperations
from .search import SearchOperations

TEXT_INDEX_NAME = "documentation_text"

# IndexOptionsConflict, IndexKeySpecsConflict: an equivalent text index exists
INDEX_CONFLICT_CODES = (85, 86)


class DocumentationStore(LoggerMixin):
    """MongoDB-backed documentation store.

    Owns the single client for the process lifetime and hands the collection
    to the operation handlers it delegates to.
    """

    def __init__(self, settings: Settings, client: Optional[AsyncMongoClient] = None):
        self.settings = settings
        self.client = client
        self.database = None
        self.collection = None
        self._initialized = False

        # Delegate operation handlers
        self._documents: Optional[DocumentOperations] = None
        self._search: Optional[SearchOperations] = None
        self._aggregation: Optional[AggregationOperations] = None
        self._fuzzy: Optional[FuzzyOperations] = None
        self._schema: Optional[SchemaOperations] = None
        self._router: Optional[ResourceRouter] = None

    async def initialize(self) -> None:
        """Connect to MongoDB and set up the operation handlers."""
        try:
            if self.client is None:
                self.client = AsyncMongoClient(
                    self.settings.MONGODB_URL,
                    serverSelectionTimeoutMS=self.settings.MONGODB_TIMEOUT_MS,
                )
            await self.client.admin.command("ping")
        except Exception as e:
            self.logger.error("MongoDB connection failed", url=self.settings.MONGODB_URL, error=str(e))
            raise ConnectionError(f"MongoDB connection failed: {e}", "mongodb") from e

        self.database = self.client[self.settings.MONGODB_DATABASE]
        self.collection = self.database[self.settings.MONGODB_COLLECTION]

        if self.settings.ENSURE_TEXT_INDEX:
            await self.ensure_text_index()

        self._attach_handlers()
        self._initialized = True

        self.logger.info(
            "Documentation store initialized",
            database=self.settings.MONGODB_DATABASE,
            collection=self.settings.MONGODB_COLLECTION,
        )

    def _attach_handlers(self) -> None:
        self._documents = DocumentOperations(self.collection, self.settings, self.logger)
        self._search = SearchOperations(self.collection, self.settings, self.logger)
        self._aggregation = AggregationOperations(self.collection, self.settings, self.logger)
        self._fuzzy = FuzzyOperations(self.collection, self.settings, self.logger)
        self._schema = SchemaOperations(self.database, self.settings, self.logger)
        self._router = ResourceRouter(self._documents, self.settings, self.logger)

    async def ensure_text_index(self) -> str:
        """Create the full-text index used by search, if it does not exist."""
        try:
            name = await self.collection.create_index(
                [(field, TEXT) for field in TEXT_INDEX_FIELDS],
                name=TEXT_INDEX_NAME,
            )
        except OperationFailure as e:
            if e.code not in INDEX_CONFLICT_CODES:
                self.logger.error("Failed to create text index", error=str(e))
                raise DatabaseError(f"Failed to create text index: {e}", "create_index") from e
            self.logger.warning("Existing text index kept", error=str(e))
            return TEXT_INDEX_NAME
        except Exception as e:
            self.logger.error("Failed to create text index", error=str(e))
            raise DatabaseError(f"Failed to create text index: {e}", "create_index") from e

        self.logger.info("Text index ensured", index=name, fields=TEXT_INDEX_FIELDS)
        return name

    async def close(self) -> None:
        """Close the store and its client."""
        if self._documents:
            await self._documents.close()

        if self.client is not None:
            await self.client.close()
            self.client = None

        self.database = None
        self.collection = None
        self._documents = None
        self._search = None
        self._aggregation = None
        self._fuzzy = None
        self._schema = None
        self._router = None
        self._initialized = False
        self.logger.info("Documentation store closed")

    def _ensure_initialized(self) -> None:
        """Ensure the store is initialized."""
        if not self._initialized:
            raise DatabaseError("Documentation store not initialized")

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    # Document Operations - delegated to DocumentOperations
    async def fetch_documentation(
        self,
        url: str,
        technology: str,
        version: Optional[str] = None,
    ) -> Record:
        """Fetch JSON documentation from ``url`` and store it."""
        self._ensure_initialized()
        return await self._documents.fetch_documentation(url, technology, version)

    async def get_record(self, record_id: str) -> Record:
        """Get a record by ID."""
        self._ensure_initialized()
        return await self._documents.get_record(record_id)

    # Search Operations - delegated to SearchOperations
    async def search(
        self,
        query: str,
        technology: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> DocumentationSearchResponse:
        """Relevance-ranked full-text search."""
        self._ensure_initialized()
        return await self._search.search(query, technology, limit)

    # Aggregation Operations - delegated to AggregationOperations
    async def aggregate(
        self,
        group_by: str,
        filter: Optional[Mapping[str, Any]] = None,
    ) -> List[GroupCount]:
        """Count records per value of ``group_by``."""
        self._ensure_initialized()
        return await self._aggregation.aggregate(group_by, filter)

    # Fuzzy Operations - delegated to FuzzyOperations
    async def fuzzy_match(
        self,
        term: str,
        field: str,
        limit: Optional[int] = None,
    ) -> List[Record]:
        """Subsequence match of ``term`` against ``field``."""
        self._ensure_initialized()
        return await self._fuzzy.fuzzy_match(term, field, limit)

    # Schema Operations - delegated to SchemaOperations
    async def describe_schema(self) -> Dict[str, List[str]]:
        """Sampled top-level field names per collection."""
        self._ensure_initialized()
        return await self._schema.describe_schema()

    # Resource resolution - delegated to ResourceRouter
    async def resolve_content(
        self, address: Union[str, ResourceAddress]
    ) -> Union[Record, List[Record], str]:
        """Resolve a ``documentation.content`` address."""
        self._ensure_initialized()
        return await self._router.resolve(address)
