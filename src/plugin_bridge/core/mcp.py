"""
MCP server descriptor mapping.

Source format (.mcp.json):
    {"mcpServers": {"name": {"command": ..., "args": [...], "env": {...}}}}
    {"mcpServers": {"name": {"url": ..., "headers": {...}}}}

Targets get the same two shapes with empty fields dropped. No validation
happens here: an entry with neither command nor url maps to {}.
"""

from typing import Any, Dict, Optional

from .types import McpServer


def convert_mcp_server(server: McpServer) -> Dict[str, Any]:
    """Map one server to a local (command) or remote (url) descriptor, never both."""
    entry: Dict[str, Any] = {}

    if server.command:
        entry["command"] = server.command
        if server.args:
            entry["args"] = list(server.args)
        if server.env:
            entry["env"] = dict(server.env)
    elif server.url:
        entry["url"] = server.url
        if server.headers:
            entry["headers"] = dict(server.headers)

    return entry


def convert_mcp_servers(servers: Optional[Dict[str, McpServer]]) -> Optional[Dict[str, Dict[str, Any]]]:
    """
    Returns None when there is nothing to write, so writers can skip the
    config file entirely.
    """
    if not servers:
        return None
    return {name: convert_mcp_server(server) for name, server in servers.items()}
