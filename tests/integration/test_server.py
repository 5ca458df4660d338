"""Integration tests for the server lifecycle."""

import asyncio
import signal
from unittest.mock import AsyncMock

import pytest

from mcp_docdb.core.exceptions import ConfigurationError
from mcp_docdb.core.server import DocDBServer
from tests.utils import FakeMongoClient


@pytest.fixture
def server(test_settings):
    server = DocDBServer(test_settings)
    server.store.client = FakeMongoClient()
    return server


class TestDocDBServer:

    def test_app_routes(self, server):
        app = server.create_app()

        paths = [getattr(route, "path", None) for route in app.routes]
        assert "/health" in paths
        assert server.app is app

    async def test_startup_and_shutdown(self, server):
        client = server.store.client

        await server._startup()
        assert server.is_running
        assert server.store.is_initialized

        await server._shutdown()
        assert not server.is_running
        assert client.closed

    async def test_shutdown_before_startup_is_noop(self, server):
        await server._shutdown()

        assert not server.store.client.closed

    async def test_unknown_transport(self, test_settings):
        settings = test_settings.model_copy(update={"MCP_TRANSPORT": "carrier-pigeon"})
        server = DocDBServer(settings)

        with pytest.raises(ConfigurationError) as exc_info:
            await server.run()

        assert exc_info.value.details["config_key"] == "MCP_TRANSPORT"

    async def test_lifespan(self, server):
        app = server.create_app()

        async with server.lifespan(app):
            assert server.store.is_initialized

        assert not server.store.is_initialized

    def test_logs_written_to_log_dir(self, server, test_settings):
        assert (test_settings.LOG_DIR / "docdb.log").exists()


class TestStdioTransport:

    async def test_serves_then_shuts_down(self, server):
        client = server.store.client
        server.mcp_handler.run_stdio = AsyncMock()

        await server.run_stdio()

        server.mcp_handler.run_stdio.assert_awaited_once()
        assert client.closed
        assert not server.is_running

    async def test_signal_during_startup_stops_cleanly(self, server):
        server.mcp_handler.run_stdio = AsyncMock()

        async def slow_initialize():
            server._handle_signal(signal.SIGTERM, asyncio.current_task())
            await asyncio.sleep(10)

        server.store.initialize = slow_initialize

        await asyncio.create_task(server.run_stdio())

        server.mcp_handler.run_stdio.assert_not_awaited()
        assert not server.is_running

    async def test_signal_while_serving_stops_cleanly(self, server):
        client = server.store.client

        async def serve_until_signal():
            server._handle_signal(signal.SIGINT, asyncio.current_task())
            await asyncio.sleep(10)

        server.mcp_handler.run_stdio = serve_until_signal

        await asyncio.create_task(server.run_stdio())

        assert client.closed
        assert not server.store.is_initialized
