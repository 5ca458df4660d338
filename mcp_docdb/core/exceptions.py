"""Custom exceptions for MCP DocDB."""

from typing import Any, Dict, Optional


class DocDBError(Exception):
    """Base exception for all MCP DocDB errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [self.message]
        if self.error_code:
            parts.append(f"(code: {self.error_code})")
        return " ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "error": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


class ConfigurationError(DocDBError):
    """Raised when there's a configuration issue."""

    def __init__(self, message: str, config_key: Optional[str] = None) -> None:
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, "CONFIGURATION_ERROR", details)


class ValidationError(DocDBError):
    """Raised when caller-supplied data fails validation."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class InvalidFieldNameError(ValidationError):
    """Raised when a field or group key contains unsafe characters."""

    def __init__(self, field_name: str, parameter: Optional[str] = None) -> None:
        super().__init__(f"Invalid field name: {field_name!r}", parameter)
        self.error_code = "INVALID_FIELD_NAME"
        self.details["field_name"] = field_name


class InvalidIdentifierError(ValidationError):
    """Raised when a record identifier is not a well-formed ObjectId."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Invalid ID format: {identifier}", "id")
        self.error_code = "INVALID_IDENTIFIER"
        self.details["identifier"] = identifier


class RecordNotFoundError(DocDBError):
    """Raised when a requested record is not found."""

    def __init__(self, record_id: str) -> None:
        super().__init__(
            f"No documentation found with ID: {record_id}",
            "RECORD_NOT_FOUND",
            {"record_id": record_id},
        )


class DatabaseError(DocDBError):
    """Raised when there's a database issue."""

    def __init__(self, message: str, operation: Optional[str] = None) -> None:
        details = {"operation": operation} if operation else {}
        super().__init__(message, "DATABASE_ERROR", details)


class QueryFailedError(DatabaseError):
    """Raised when the store rejects or fails a query."""

    def __init__(self, message: str, operation: Optional[str] = None) -> None:
        super().__init__(message, operation)
        self.error_code = "QUERY_FAILED"


class IndexUnavailableError(DatabaseError):
    """Raised when a text search runs without the full-text index."""

    def __init__(self, fields: Optional[list] = None) -> None:
        fields = fields or ["technology", "content.title", "content.description"]
        super().__init__(
            "Text search requires a text index on the collection. "
            f"Please create one over: {', '.join(fields)}.",
            "search",
        )
        self.error_code = "INDEX_UNAVAILABLE"
        self.details["index_fields"] = fields


class IngestionError(DocDBError):
    """Raised when remote documentation cannot be fetched or parsed."""

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        details = {"url": url} if url else {}
        super().__init__(message, "INGESTION_ERROR", details)


class ConnectionError(DocDBError):
    """Raised when there's a connection issue."""

    def __init__(self, message: str, service: Optional[str] = None) -> None:
        details = {"service": service} if service else {}
        super().__init__(message, "CONNECTION_ERROR", details)
