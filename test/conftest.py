from __future__ import annotations

from pathlib import Path
from typing import Iterable

import httpx
import pytest
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

# Load dotenv files early so the settings module reads them on first import
TEST_ROOT = Path(__file__).resolve().parent
# Load test/.env first, then fallback to test/.env.example for defaults
load_dotenv(TEST_ROOT / ".env", override=False)
load_dotenv(TEST_ROOT / ".env.example", override=False)

from capmesh.registry import (  # noqa: E402
    ActionDefinition,
    InMemoryDispatcher,
    NamingConfig,
    PydanticSchema,
    Registry,
    TemplateDefinition,
    TemplateMessage,
)


class MessageArgs(BaseModel):
    message: str = Field(..., description="Message")

    model_config = ConfigDict(strict=True)


class MessageResult(BaseModel):
    message: str


class TopicArgs(BaseModel):
    topic: str = Field(..., description="Topic to write about")


def _message_action(name: str = "echo", description: str = "Echoes back the input") -> ActionDefinition:
    return ActionDefinition(
        name=name,
        description=description,
        input_schema=PydanticSchema(MessageArgs),
        output_schema=PydanticSchema(MessageResult),
    )


def _topic_template(name: str = "essay", description: str = "Write an essay") -> TemplateDefinition:
    return TemplateDefinition(name=name, description=description, args_schema=PydanticSchema(TopicArgs))


async def _echo(args: MessageArgs) -> MessageResult:
    return MessageResult(message=args.message)


async def _essay(args: TopicArgs):
    return [TemplateMessage.user(f"Write about {args.topic}")]


@pytest.fixture
def naming() -> NamingConfig:
    return NamingConfig(prefix="mcp")


@pytest.fixture
def registry(naming: NamingConfig) -> Registry:
    return Registry(naming)


@pytest.fixture
def dispatcher() -> InMemoryDispatcher:
    return InMemoryDispatcher()


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    allowed_prefixes: Iterable[str] = (
        "http://mock",
        "https://mock",
        "http://test",
        "http://localhost",
        "http://127.0.0.1",
        "/",  # Allow relative paths (used by ASGI transport)
    )

    orig_sync = httpx._client.Client.request
    orig_async = httpx._client.AsyncClient.request

    def _is_allowed(url_str: str) -> bool:
        return any(url_str.startswith(p) for p in allowed_prefixes)

    def offline_sync(self, method, url, *args, **kwargs):
        url_str = str(url)
        if _is_allowed(url_str):
            return orig_sync(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard: {url_str}")

    async def offline_async(self, method, url, *args, **kwargs):
        url_str = str(url)
        if _is_allowed(url_str):
            return await orig_async(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard (async): {url_str}")

    monkeypatch.setattr(httpx._client.Client, "request", offline_sync, raising=True)
    monkeypatch.setattr(httpx._client.AsyncClient, "request", offline_async, raising=True)


@pytest.fixture
def make_action_definition():
    """Factory for action definitions taking ``{message: str}`` and returning ``{message: str}``."""
    return _message_action


@pytest.fixture
def make_template_definition():
    """Factory for template definitions taking ``{topic: str}``."""
    return _topic_template


@pytest.fixture
def echo_definition() -> ActionDefinition:
    return _message_action()


@pytest.fixture
def echo_behavior():
    return _echo


@pytest.fixture
def essay_definition() -> TemplateDefinition:
    return _topic_template()


@pytest.fixture
def essay_generator():
    return _essay
