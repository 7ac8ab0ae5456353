"""Core abstractions for Plugin Bridge."""

from .types import (
    ClaudeAgent,
    ClaudeCommand,
    ClaudePlugin,
    ClaudeSkill,
    ConvertOptions,
    McpServer,
    PluginManifest,
    WriteResult,
)
from .converter import BaseTarget, target_registry
from .naming import flatten_command_name, normalize_name, unique_name
from .rewrite import RewriteTable, rewrite_content
from .loader import PluginLoadError, load_claude_plugin

__all__ = [
    "ClaudeAgent",
    "ClaudeCommand",
    "ClaudePlugin",
    "ClaudeSkill",
    "ConvertOptions",
    "McpServer",
    "PluginManifest",
    "WriteResult",
    "BaseTarget",
    "target_registry",
    "flatten_command_name",
    "normalize_name",
    "unique_name",
    "RewriteTable",
    "rewrite_content",
    "PluginLoadError",
    "load_claude_plugin",
]
