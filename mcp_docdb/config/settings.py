"""Configuration settings for MCP DocDB."""

from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server Configuration
    SERVER_HOST: str = Field(default="localhost", description="Server host (sse transport)")
    SERVER_PORT: int = Field(default=8000, description="Server port (sse transport)")
    DEBUG: bool = Field(default=False, description="Debug mode")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_DIR: Path = Field(default=Path("logs"), description="Directory for log files")
    CORS_ORIGINS: List[str] = Field(default=["*"], description="Allowed CORS origins (sse transport)")

    # MongoDB Configuration
    MONGODB_URL: str = Field(
        default="mongodb://localhost:27017", description="MongoDB connection URL"
    )
    MONGODB_DATABASE: str = Field(
        default="documentation_db", description="MongoDB database name"
    )
    MONGODB_COLLECTION: str = Field(
        default="documentations", description="Collection holding documentation records"
    )
    MONGODB_TIMEOUT_MS: int = Field(
        default=5000, description="Server selection timeout in milliseconds"
    )
    ENSURE_TEXT_INDEX: bool = Field(
        default=True, description="Create the full-text index on startup if missing"
    )

    # Query Configuration
    DEFAULT_SEARCH_LIMIT: int = Field(
        default=10, ge=1, description="Default number of search results"
    )
    RESOURCE_LIST_LIMIT: int = Field(
        default=10, ge=1, description="Records returned by a scoped resource lookup"
    )
    FUZZY_RESULT_LIMIT: int = Field(
        default=10, ge=1, description="Default number of fuzzy match results"
    )
    PREVIEW_LENGTH: int = Field(
        default=100, ge=1, description="Characters of content shown per search hit"
    )

    # Ingestion Configuration
    FETCH_TIMEOUT_SECONDS: float = Field(
        default=30.0, gt=0, description="HTTP timeout when fetching documentation"
    )

    # MCP Protocol Configuration
    MCP_SERVER_NAME: str = Field(
        default="Documentation Database Server", description="MCP server name"
    )
    MCP_SERVER_VERSION: str = Field(
        default="1.0.0", description="MCP server version"
    )
    MCP_TRANSPORT: str = Field(
        default="stdio", description="MCP transport: 'stdio' or 'sse'"
    )

    def create_directories(self) -> None:
        """Create necessary directories."""
        self.LOG_DIR.mkdir(parents=True, exist_ok=True)

    def __repr__(self) -> str:
        """String representation of settings."""
        return (
            f"Settings(transport={self.MCP_TRANSPORT}, "
            f"database={self.MONGODB_DATABASE}, debug={self.DEBUG})"
        )
