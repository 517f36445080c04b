"""Unit tests for the bundled tools and prompts."""

from __future__ import annotations

import pytest

from capmesh.capabilities import ACTIONS, TEMPLATES, load_capabilities
from capmesh.capabilities.actions.add import AddInput, add, add_action
from capmesh.capabilities.actions.echo import EchoInput, echo
from capmesh.capabilities.templates.degpt_content import DegptContentArgs, degpt_content
from capmesh.capabilities.templates.git_workflow import GitWorkflowArgs, git_workflow
from capmesh.registry import (
    ActionBinding,
    ComponentError,
    ComponentErrorType,
    NamingConfig,
    Registry,
    RegistryStatus,
    SchemaValidationError,
)


class TestAddAction:
    @pytest.mark.asyncio
    async def test_adds_integers(self) -> None:
        result = await add(AddInput(a=2, b=3))
        assert result.result == 5
        assert result.model_dump_json() == '{"result":5}'

    @pytest.mark.asyncio
    async def test_adds_floats(self) -> None:
        assert (await add(AddInput(a=1.5, b=2))).result == 3.5

    @pytest.mark.parametrize("raw", [{"a": "x", "b": 3}, {"a": "2", "b": 3}, {"a": True, "b": 3}, {"a": 1}])
    def test_rejects_non_numbers(self, raw) -> None:
        with pytest.raises(SchemaValidationError):
            add_action.definition.input_schema.validate(raw)


class TestEchoAction:
    @pytest.mark.asyncio
    async def test_echoes_message(self) -> None:
        assert (await echo(EchoInput(message="hi"))).message == "hi"


class TestTemplates:
    @pytest.mark.asyncio
    async def test_degpt_content_embeds_text(self) -> None:
        messages = await degpt_content(DegptContentArgs(content="This is a game changer."))

        assert len(messages) == 1
        assert messages[0].role == "user"
        assert "This is a game changer." in messages[0].content.text
        assert "remove common AI language patterns" in messages[0].content.text

    @pytest.mark.asyncio
    async def test_git_workflow_embeds_changes(self) -> None:
        messages = await git_workflow(GitWorkflowArgs(changes="fix typo in README"))

        text = messages[0].content.text
        assert "fix typo in README" in text
        assert 'git commit -m "{generated commit message}"' in text
        assert text.endswith("git push")


class TestLoadCapabilities:
    def test_registers_bundled_capabilities(self) -> None:
        registry = load_capabilities(Registry(NamingConfig(prefix="mcp")))

        assert registry.actions.names() == ["mcp_add", "mcp_echo"]
        assert registry.templates.names() == ["mcp_degpt-content", "mcp_git-workflow"]
        assert registry.status is RegistryStatus.COLLECTING

    def test_respects_absent_prefix(self) -> None:
        registry = load_capabilities(Registry())
        assert registry.actions.names() == ["add", "echo"]

    def test_explicit_bindings_replace_defaults(self) -> None:
        registry = load_capabilities(Registry(), actions=[add_action], templates=[])

        assert registry.actions.names() == ["add"]
        assert len(registry.templates) == 0

    def test_importing_modules_registers_nothing(self) -> None:
        assert len(ACTIONS) == 2
        assert len(TEMPLATES) == 2
        assert all(isinstance(a, ActionBinding) for a in ACTIONS)

    def test_loading_twice_fails_with_already_exists(self) -> None:
        registry = load_capabilities(Registry())

        with pytest.raises(ComponentError) as exc_info:
            load_capabilities(registry)

        assert exc_info.value.error_type is ComponentErrorType.ALREADY_EXISTS
