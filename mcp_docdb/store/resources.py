"""Resolution of ``documentation.content`` resource addresses.

Addresses follow ``documentation.content/{id?}/{technology?}/{version?}``:
segments are positional, and an empty segment or ``-`` marks one as absent,
so ``documentation.content/-/react/18`` selects by technology and version.
"""

from typing import List, Optional, Union
from urllib.parse import unquote

from ..config.settings import Settings
from ..core.exceptions import ValidationError
from ..models.documentation import ById, ByScope, Record, ResourceAddress, Unscoped
from .documents import DocumentOperations
from .filters import build_scope_filter

RESOURCE_NAME = "documentation.content"
ABSENT_SEGMENT = "-"
MAX_SEGMENTS = 3
GUIDANCE_MESSAGE = "Please provide technology/version or an ID."


def _segment(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = unquote(value).strip()
    if not value or value == ABSENT_SEGMENT:
        return None
    return value


def address_from_segments(
    id: Optional[str] = None,
    technology: Optional[str] = None,
    version: Optional[str] = None,
) -> ResourceAddress:
    """Classify optional segments into an address variant."""
    id, technology, version = _segment(id), _segment(technology), _segment(version)
    if id:
        return ById(id=id)
    if technology or version:
        return ByScope(technology=technology, version=version)
    return Unscoped()


def parse_resource_address(address: str) -> ResourceAddress:
    """Parse a full address, with or without a URI scheme."""
    path = address.split("://", 1)[1] if "://" in address else address
    path = path.rstrip("/")

    if path == RESOURCE_NAME:
        return Unscoped()
    if not path.startswith(RESOURCE_NAME + "/"):
        raise ValidationError(f"Unknown resource address: {address}", "address")

    segments = path[len(RESOURCE_NAME) + 1:].split("/")
    if len(segments) > MAX_SEGMENTS:
        raise ValidationError(
            f"Too many path segments in resource address: {address}", "address"
        )
    return address_from_segments(*segments)


class ResourceRouter:
    """Dispatches an address to an id lookup or a scope lookup."""

    def __init__(self, documents: DocumentOperations, settings: Settings, logger):
        self.documents = documents
        self.settings = settings
        self.logger = logger

    async def resolve(
        self, address: Union[str, ResourceAddress]
    ) -> Union[Record, List[Record], str]:
        """Resolve an address to a record, a list of records or guidance text."""
        if isinstance(address, str):
            address = parse_resource_address(address)

        self.logger.info("Resolving documentation content", address=address.model_dump())

        if isinstance(address, ById):
            return await self.documents.get_record(address.id)

        if isinstance(address, ByScope):
            query_filter = build_scope_filter(address.technology, address.version)
            return await self.documents.find_records(
                query_filter, self.settings.RESOURCE_LIST_LIMIT
            )

        return GUIDANCE_MESSAGE
