from __future__ import annotations

from capmesh.registry import ComponentError, ComponentErrorType


class TestComponentError:
    def test_message_is_tagged_with_kind(self) -> None:
        err = ComponentError(ComponentErrorType.NOT_FOUND, "Unknown tool: x", "x")
        assert str(err) == "NOT_FOUND: Unknown tool: x"
        assert err.error_type is ComponentErrorType.NOT_FOUND
        assert err.message == "Unknown tool: x"
        assert err.component_name == "x"
        assert err.cause is None

    def test_cause_is_retained(self) -> None:
        cause = ValueError("boom")
        err = ComponentError(ComponentErrorType.EXECUTION_ERROR, "failed", "x", cause=cause)
        assert err.cause is cause

    def test_kinds_are_string_tags(self) -> None:
        assert {k.value for k in ComponentErrorType} == {
            "NOT_FOUND",
            "ALREADY_EXISTS",
            "INVALID_ARGS",
            "EXECUTION_ERROR",
        }
