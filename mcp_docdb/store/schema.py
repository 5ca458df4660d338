"""Sampling-based schema introspection."""

from typing import Dict, List

from ..config.settings import Settings
from ..core.exceptions import QueryFailedError

SYSTEM_COLLECTION_PREFIX = "system."


class SchemaOperations:
    """Reports the top-level fields observed in each collection.

    One arbitrary document is sampled per collection, so heterogeneous
    collections may report an incomplete field set.
    """

    def __init__(self, database, settings: Settings, logger):
        self.database = database
        self.settings = settings
        self.logger = logger

    async def describe_schema(self) -> Dict[str, List[str]]:
        """Map each non-system collection to its sampled field names."""
        schema: Dict[str, List[str]] = {}

        try:
            names = await self.database.list_collection_names()
            for name in sorted(names):
                if name.startswith(SYSTEM_COLLECTION_PREFIX):
                    continue
                sample = await self.database[name].find_one({})
                schema[name] = list(sample.keys()) if sample else ["_id"]
        except Exception as e:
            self.logger.error("Failed to fetch database schema", error=str(e))
            raise QueryFailedError(f"Failed to fetch database schema: {e}", "describe_schema") from e

        self.logger.info("Database schema fetched", collections=len(schema))
        return schema
