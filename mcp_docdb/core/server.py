"""Main MCP DocDB server implementation."""

import asyncio
import contextlib
import signal
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..config.logging import LoggerMixin, setup_logging
from ..config.settings import Settings
from ..mcp.fastmcp_handler import FastMCPHandler
from ..store import DocumentationStore
from .exceptions import ConfigurationError, DocDBError

TRANSPORTS = ("stdio", "sse")
STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class DocDBServer(LoggerMixin):
    """Main MCP DocDB server: one store handle shared by every MCP call."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        """Initialize the server with configuration."""
        self.settings = settings or Settings()

        # Set up logging
        setup_logging(self.settings)
        self.logger.info("Initializing MCP DocDB server", version=self.settings.MCP_SERVER_VERSION)

        # The store connects on startup; tools hold a reference to it now
        self.store = DocumentationStore(self.settings)
        self.mcp_handler = FastMCPHandler(self.store, self.settings)

        self.app: Optional[FastAPI] = None
        self._running = False

    @asynccontextmanager
    async def lifespan(self, app: FastAPI) -> AsyncGenerator[None, None]:
        """FastAPI lifespan context manager."""
        try:
            await self._startup()
            yield
        finally:
            await self._shutdown()

    async def _startup(self) -> None:
        """Connect the documentation store."""
        self.logger.info("Starting MCP DocDB server components")

        try:
            await self.store.initialize()
            self._running = True
            self.logger.info("All server components started successfully")
        except Exception as e:
            self.logger.error("Failed to start server components", error=str(e))
            raise

    async def _shutdown(self) -> None:
        """Disconnect the documentation store."""
        if not self._running and not self.store.is_initialized:
            return

        self.logger.info("Shutting down MCP DocDB server")
        self._running = False
        await self.store.close()
        self.logger.info("Server shutdown complete")

    def create_app(self) -> FastAPI:
        """Create the FastAPI application serving MCP over SSE."""
        app = FastAPI(
            title="MCP DocDB",
            description="Documentation knowledge base over the Model Context Protocol",
            version=self.settings.MCP_SERVER_VERSION,
            lifespan=self.lifespan,
        )

        app.add_middleware(
            CORSMiddleware,
            allow_origins=self.settings.CORS_ORIGINS,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

        @app.exception_handler(DocDBError)
        async def docdb_exception_handler(request, exc: DocDBError):
            return JSONResponse(
                status_code=400,
                content=exc.to_dict()
            )

        @app.exception_handler(Exception)
        async def general_exception_handler(request, exc: Exception):
            self.logger.error("Unhandled exception", error=str(exc), exc_info=True)
            return JSONResponse(
                status_code=500,
                content={"error": "Internal server error"}
            )

        @app.get("/health")
        async def health_check():
            """Health check endpoint."""
            return {
                "status": "healthy" if self.store.is_initialized else "starting",
                "version": self.settings.MCP_SERVER_VERSION,
                "components": {
                    "store": self.store.is_initialized,
                    "mcp": self.mcp_handler is not None,
                },
            }

        app.mount("/", self.mcp_handler.get_app())

        self.app = app
        return app

    async def run(self) -> None:
        """Serve over the configured transport."""
        transport = self.settings.MCP_TRANSPORT.lower()
        if transport == "stdio":
            await self.run_stdio()
        elif transport == "sse":
            await self.run_sse()
        else:
            raise ConfigurationError(
                f"Unknown MCP transport {transport!r}, expected one of {TRANSPORTS}",
                "MCP_TRANSPORT",
            )

    async def run_stdio(self) -> None:
        """Serve MCP over stdio; SIGINT/SIGTERM stop the server cleanly."""
        loop = asyncio.get_running_loop()
        task = asyncio.current_task()

        for signum in STOP_SIGNALS:
            # Not available on Windows event loops
            with contextlib.suppress(NotImplementedError):
                loop.add_signal_handler(signum, self._handle_signal, signum, task)

        try:
            await self._startup()
            self.logger.info("MCP Documentation Server started via stdio")
            await self.mcp_handler.run_stdio()
        except asyncio.CancelledError:
            self.logger.info("stdio transport stopped")
        finally:
            for signum in STOP_SIGNALS:
                with contextlib.suppress(NotImplementedError):
                    loop.remove_signal_handler(signum)
            await self._shutdown()

    def _handle_signal(self, signum: int, task: Optional[asyncio.Task]) -> None:
        self.logger.info(f"Received signal {signum}, shutting down gracefully")
        if task is not None:
            task.cancel()

    async def run_sse(self) -> None:
        """Serve MCP over SSE using uvicorn."""
        app = self.create_app()

        config = uvicorn.Config(
            app,
            host=self.settings.SERVER_HOST,
            port=self.settings.SERVER_PORT,
            log_level=self.settings.LOG_LEVEL.lower(),
            access_log=self.settings.DEBUG,
        )

        server = uvicorn.Server(config)
        await server.serve()

    @property
    def is_running(self) -> bool:
        """Check if the server is running."""
        return self._running
