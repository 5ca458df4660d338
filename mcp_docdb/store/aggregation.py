"""Group-count aggregation operations handler."""

from typing import Any, Dict, List, Mapping, Optional

from ..config.settings import Settings
from ..core.exceptions import QueryFailedError
from ..models.documentation import GroupCount
from ..utils.validation import validate_field_name, validate_filter


def build_group_pipeline(
    group_by: str,
    match: Optional[Mapping[str, Any]] = None,
) -> List[Dict[str, Any]]:
    """Build a match -> group-count -> sort-descending pipeline.

    ``group_by`` is validated here since it becomes part of an expression.
    Equal counts are ordered by group value so repeated runs agree.
    """
    field = validate_field_name(group_by, "group_by")
    return [
        {"$match": validate_filter(match)},
        {"$group": {"_id": f"${field}", "count": {"$sum": 1}}},
        {"$sort": {"count": -1, "_id": 1}},
    ]


class AggregationOperations:
    """Handles grouping pipelines over documentation records."""

    def __init__(self, collection, settings: Settings, logger):
        self.collection = collection
        self.settings = settings
        self.logger = logger

    async def aggregate(
        self,
        group_by: str,
        filter: Optional[Mapping[str, Any]] = None,
    ) -> List[GroupCount]:
        """Count records per distinct value of ``group_by``."""
        pipeline = build_group_pipeline(group_by, filter)

        try:
            cursor = await self.collection.aggregate(pipeline)
            groups = await cursor.to_list(length=None)
        except Exception as e:
            self.logger.error("Failed to aggregate documentation", group_by=group_by, error=str(e))
            raise QueryFailedError(f"Failed to aggregate documentation: {e}", "aggregate") from e

        self.logger.info("Aggregation completed", group_by=group_by, groups=len(groups))
        return [GroupCount.model_validate(group) for group in groups]
