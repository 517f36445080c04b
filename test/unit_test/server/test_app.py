"""Unit tests for MCP server construction."""

from mcp import types
from mcp.server.lowlevel import Server

from capmesh.registry import RegistryStatus
from capmesh.server.app import create_server
from capmesh.server.core.config import Settings
from capmesh.server.mcp_dispatcher import McpServerDispatcher


class TestCreateServer:
    def test_builds_ready_registry(self):
        server, registry = create_server(Settings(prefix="mcp", server_name="capmesh-test", server_version="2.0.0"))

        assert isinstance(server, Server)
        assert server.name == "capmesh-test"
        assert server.version == "2.0.0"
        assert registry.status is RegistryStatus.READY
        assert isinstance(registry.dispatcher, McpServerDispatcher)
        assert registry.actions.names() == ["mcp_add", "mcp_echo"]
        assert registry.templates.names() == ["mcp_degpt-content", "mcp_git-workflow"]

    def test_all_operations_bound(self):
        server, _ = create_server(Settings(prefix="mcp"))

        for request_type in (
            types.ListToolsRequest,
            types.CallToolRequest,
            types.ListPromptsRequest,
            types.GetPromptRequest,
        ):
            assert request_type in server.request_handlers

    def test_unprefixed_names(self):
        _, registry = create_server(Settings(prefix=""))

        assert registry.actions.names() == ["add", "echo"]

    def test_each_call_creates_independent_registry(self):
        _, first = create_server(Settings(prefix="mcp"))
        _, second = create_server(Settings(prefix="mcp"))

        first.unregister_action("mcp_add")

        assert "mcp_add" in second.actions
