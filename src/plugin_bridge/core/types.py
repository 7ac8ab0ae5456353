"""Shared types and data structures for Plugin Bridge."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


# =============================================================================
# CANONICAL PLUGIN (source side)
# =============================================================================


@dataclass
class PluginManifest:
    name: str
    version: Optional[str] = None
    description: Optional[str] = None


@dataclass
class ClaudeAgent:
    """One agent definition from agents/*.md."""
    name: str
    body: str
    description: Optional[str] = None
    capabilities: Optional[List[str]] = None
    model: Optional[str] = None
    source_path: Optional[Path] = None


@dataclass
class ClaudeCommand:
    """One slash command. `name` may be namespaced, e.g. "workflows:plan"."""
    name: str
    body: str
    description: Optional[str] = None
    argument_hint: Optional[str] = None
    model: Optional[str] = None
    allowed_tools: Optional[List[str]] = None
    source_path: Optional[Path] = None


@dataclass
class ClaudeSkill:
    name: str
    source_dir: Path
    description: Optional[str] = None
    skill_path: Optional[Path] = None


@dataclass
class McpServer:
    """
    Either a local server (command/args/env) or a remote one (url/headers).
    """
    command: Optional[str] = None
    args: Optional[List[str]] = None
    env: Optional[Dict[str, str]] = None
    url: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


@dataclass
class ClaudePlugin:
    """
    Single source of truth for a plugin.
    Each target maps this to its own format; nothing here is mutated by a conversion.
    """
    root: Path
    manifest: PluginManifest
    agents: List[ClaudeAgent] = field(default_factory=list)
    commands: List[ClaudeCommand] = field(default_factory=list)
    skills: List[ClaudeSkill] = field(default_factory=list)
    hooks: Optional[Dict[str, List[Any]]] = None  # event name -> matcher definitions
    mcp_servers: Optional[Dict[str, McpServer]] = None


@dataclass
class ConvertOptions:
    """
    Target-specific knobs. Only target converters read these; the shared
    engine never does.
    """
    agent_mode: str = "subagent"  # "primary" | "subagent"
    infer_temperature: bool = False
    permissions: str = "none"  # "none" | "broad" | "from-commands"


# =============================================================================
# TARGET SIDE
# =============================================================================


@dataclass
class TargetFormat:
    """Metadata about one target tool."""
    name: str
    display_name: str
    output_dir: str
    checkbox_label: str = ""  # For TUI display, e.g. "Cursor (.cursor/)"
    status: str = "beta"
    supports_hooks: bool = False
    description: str = ""


@dataclass
class WriteResult:
    rules: int = 0
    commands: int = 0
    skills: int = 0
    mcp_servers: int = 0
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return len(self.errors) == 0
