"""capmesh.

This package contains a Model Context Protocol (MCP) server that exposes a
dynamic set of capabilities to a remote client.

High-level architecture
-----------------------

Two capability kinds are served:

- **Actions** (MCP *tools*): invocable operations with a validated input
  schema and a declared output schema. A failing action still answers with a
  well-formed result whose text describes the error.
- **Templates** (MCP *prompts*): generators of ready-made messages. A failing
  template answers with a protocol error.

Core subpackages
----------------

- ``capmesh.registry``: definitions, components, repositories, the registry
  lifecycle and the dispatcher boundary.
- ``capmesh.capabilities``: bundled tools and prompts plus the bootstrap that
  registers them.
- ``capmesh.server``: MCP binding, stdio and SSE transports, configuration and
  the health/status HTTP API.

Typical workflow
----------------

1. Build a ``Registry`` with the configured naming prefix.
2. Register capability bindings (``load_capabilities``).
3. Bind the registry to a dispatcher (``McpServerDispatcher``).
4. Serve the MCP server over stdio or SSE.
"""
