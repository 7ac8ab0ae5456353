"""
Plugin Bridge - Claude plugin converter for other AI coding tools.

Converts a Claude Code plugin (agents, commands, skills, hooks, MCP servers) to:
- Cursor AI (.cursor/)
"""

__version__ = "0.1.0"

# Trigger target auto-registration on import
from plugin_bridge import converters  # noqa: F401

__all__ = [
    "cli",
    "converters",
    "core",
    "services",
    "utils",
]
