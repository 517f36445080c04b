from __future__ import annotations

import pytest

from capmesh.registry import Dispatcher, DispatchError, InMemoryDispatcher, Operation


class TestInMemoryDispatcher:
    def test_satisfies_dispatcher_protocol(self) -> None:
        assert isinstance(InMemoryDispatcher(), Dispatcher)

    def test_operations_use_mcp_method_names(self) -> None:
        assert Operation.LIST_ACTIONS.value == "tools/list"
        assert Operation.CALL_ACTION.value == "tools/call"
        assert Operation.LIST_TEMPLATES.value == "prompts/list"
        assert Operation.GET_TEMPLATE.value == "prompts/get"

    @pytest.mark.asyncio
    async def test_unbound_operation_raises(self) -> None:
        with pytest.raises(DispatchError) as exc_info:
            await InMemoryDispatcher().list_actions()
        assert exc_info.value.operation is Operation.LIST_ACTIONS

    @pytest.mark.asyncio
    async def test_call_routes_name_and_arguments(self) -> None:
        seen = []

        async def _handler(name, arguments):
            seen.append((name, arguments))
            return "ok"

        dispatcher = InMemoryDispatcher()
        dispatcher.set_request_handler(Operation.CALL_ACTION, _handler)

        assert await dispatcher.call_action("mcp_add", {"a": 1}) == "ok"
        assert seen == [("mcp_add", {"a": 1})]

    @pytest.mark.asyncio
    async def test_rebinding_replaces_handler(self) -> None:
        async def _first():
            return "first"

        async def _second():
            return "second"

        dispatcher = InMemoryDispatcher()
        dispatcher.set_request_handler(Operation.LIST_TEMPLATES, _first)
        dispatcher.set_request_handler(Operation.LIST_TEMPLATES, _second)

        assert await dispatcher.list_templates() == "second"
