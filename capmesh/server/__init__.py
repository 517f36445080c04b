"""MCP server wiring: transports, HTTP app and configuration."""
