"""Documentation ingestion and record lookup operations."""

from typing import Any, Dict, List, Optional

import aiohttp

from ..config.settings import Settings
from ..core.exceptions import IngestionError, QueryFailedError, RecordNotFoundError
from ..models.documentation import Record
from ..utils.validation import validate_record_id, validate_technology, validate_url


class DocumentOperations:
    """Handles record creation from remote JSON and direct record reads.

    Records are never updated or deleted here.
    """

    def __init__(self, collection, settings: Settings, logger):
        self.collection = collection
        self.settings = settings
        self.logger = logger
        self._session: Optional[aiohttp.ClientSession] = None

    async def close(self) -> None:
        """Close the HTTP session, if one was opened."""
        if self._session:
            await self._session.close()
            self._session = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.settings.FETCH_TIMEOUT_SECONDS)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def fetch_content(self, url: str) -> Any:
        """GET ``url`` and decode its JSON body."""
        validate_url(url)
        self.logger.info("Fetching documentation", url=url)

        try:
            async with self._get_session().get(url) as response:
                if response.status >= 400:
                    raise IngestionError(f"HTTP error! status: {response.status}", url)
                return await response.json(content_type=None)
        except IngestionError:
            raise
        except (aiohttp.ClientError, TimeoutError, ValueError) as e:
            self.logger.error("Failed to fetch documentation", url=url, error=str(e))
            raise IngestionError(f"Failed to fetch documentation: {e}", url) from e

    async def add_record(self, record: Record) -> Record:
        """Store a new record and return it with its assigned identifier."""
        try:
            result = await self.collection.insert_one(record.to_document())
        except Exception as e:
            self.logger.error("Failed to store documentation", technology=record.technology, error=str(e))
            raise QueryFailedError(f"Failed to store documentation: {e}", "insert") from e

        stored = record.model_copy(update={"id": str(result.inserted_id)})
        self.logger.info(
            "Documentation stored",
            record_id=stored.id,
            technology=stored.technology,
            version=stored.version,
        )
        return stored

    async def fetch_documentation(
        self,
        url: str,
        technology: str,
        version: Optional[str] = None,
    ) -> Record:
        """Fetch a JSON document and store it as a new record."""
        validate_technology(technology, required=True)
        content = await self.fetch_content(url)
        return await self.add_record(Record.create(technology, content, version))

    async def get_record(self, record_id: str) -> Record:
        """Fetch exactly one record by identifier."""
        object_id = validate_record_id(record_id)

        try:
            document = await self.collection.find_one({"_id": object_id})
        except Exception as e:
            self.logger.error("Failed to get record", record_id=record_id, error=str(e))
            raise QueryFailedError(f"Failed to get record: {e}", "find_one") from e

        if document is None:
            raise RecordNotFoundError(record_id)

        self.logger.debug("Record retrieved", record_id=record_id)
        return Record.from_document(document)

    async def find_records(self, query_filter: Dict[str, Any], limit: int) -> List[Record]:
        """Fetch up to ``limit`` records matching an equality filter."""
        try:
            documents = await self.collection.find(query_filter).limit(limit).to_list(length=limit)
        except Exception as e:
            self.logger.error("Failed to find records", filter=query_filter, error=str(e))
            raise QueryFailedError(f"Failed to find records: {e}", "find") from e

        self.logger.debug("Records retrieved", filter=query_filter, count=len(documents))
        return [Record.from_document(document) for document in documents[:limit]]
