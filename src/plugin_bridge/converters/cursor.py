"""
Cursor AI target — converts a Claude plugin to .cursor/rules, commands, skills, mcp.json.
"""

from pathlib import Path

from plugin_bridge.core.converter import BaseTarget, target_registry
from plugin_bridge.core.types import ClaudePlugin, ConvertOptions, TargetFormat, WriteResult
from plugin_bridge.converters._cursor_impl import (
    CURSOR_FORMAT,
    CursorBundle,
    convert_claude_to_cursor,
    write_cursor_bundle,
)


class CursorTarget(BaseTarget):
    """Target for Cursor AI format."""

    @property
    def format_info(self) -> TargetFormat:
        return CURSOR_FORMAT

    def convert(self, plugin: ClaudePlugin, options: ConvertOptions) -> CursorBundle:
        return convert_claude_to_cursor(plugin, options)

    def write(self, output_root: Path, bundle: CursorBundle, verbose: bool = False) -> WriteResult:
        return write_cursor_bundle(output_root, bundle, verbose=verbose)


target_registry.register(CursorTarget)
