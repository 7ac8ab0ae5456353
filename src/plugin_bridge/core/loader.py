"""
Load a Claude Code plugin directory into a ClaudePlugin.

Expected layout:
    <root>/.claude-plugin/plugin.json   (manifest, required)
    <root>/agents/**/*.md
    <root>/commands/**/*.md             (commands/workflows/plan.md -> "workflows:plan")
    <root>/skills/<name>/SKILL.md
    <root>/hooks/hooks.json
    <root>/.mcp.json
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .frontmatter import parse_frontmatter
from .types import (
    ClaudeAgent,
    ClaudeCommand,
    ClaudePlugin,
    ClaudeSkill,
    McpServer,
    PluginManifest,
)

MANIFEST_PATH = Path(".claude-plugin") / "plugin.json"


class PluginLoadError(ValueError):
    """Raised when a plugin directory cannot be read."""


# =============================================================================
# FILE HELPERS
# =============================================================================


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise PluginLoadError(f"Invalid JSON in {path}: {e}") from e


def _read_markdown(path: Path) -> tuple[Dict[str, Any], str]:
    try:
        return parse_frontmatter(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise PluginLoadError(f"Invalid frontmatter in {path}: {e}") from e


def _as_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _as_list(value: Any) -> Optional[List[str]]:
    """Accept a YAML list or a comma separated string."""
    if value is None:
        return None
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return [str(item) for item in value]


# =============================================================================
# SECTION LOADERS
# =============================================================================


def load_manifest(root: Path) -> PluginManifest:
    manifest_file = root / MANIFEST_PATH
    if not manifest_file.exists():
        raise PluginLoadError(f"No plugin manifest found at {manifest_file}")

    data = _read_json(manifest_file)
    if not isinstance(data, dict) or not data.get("name"):
        raise PluginLoadError(f"Plugin manifest {manifest_file} must define a name")

    return PluginManifest(
        name=str(data["name"]),
        version=_as_str(data.get("version")),
        description=_as_str(data.get("description")),
    )


def load_agents(root: Path) -> List[ClaudeAgent]:
    agents_dir = root / "agents"
    if not agents_dir.is_dir():
        return []

    agents = []
    for agent_file in sorted(agents_dir.rglob("*.md")):
        meta, body = _read_markdown(agent_file)
        agents.append(
            ClaudeAgent(
                name=str(meta.get("name") or agent_file.stem),
                body=body,
                description=_as_str(meta.get("description")),
                capabilities=_as_list(meta.get("capabilities")),
                model=_as_str(meta.get("model")),
                source_path=agent_file,
            )
        )
    return agents


def load_commands(root: Path) -> List[ClaudeCommand]:
    commands_dir = root / "commands"
    if not commands_dir.is_dir():
        return []

    commands = []
    for command_file in sorted(commands_dir.rglob("*.md")):
        meta, body = _read_markdown(command_file)
        default_name = ":".join(command_file.relative_to(commands_dir).with_suffix("").parts)
        commands.append(
            ClaudeCommand(
                name=str(meta.get("name") or default_name),
                body=body,
                description=_as_str(meta.get("description")),
                argument_hint=_as_str(meta.get("argument-hint")),
                model=_as_str(meta.get("model")),
                allowed_tools=_as_list(meta.get("allowed-tools")),
                source_path=command_file,
            )
        )
    return commands


def load_skills(root: Path) -> List[ClaudeSkill]:
    skills_dir = root / "skills"
    if not skills_dir.is_dir():
        return []

    skills = []
    for skill_dir in sorted(p for p in skills_dir.iterdir() if p.is_dir()):
        skill_file = skill_dir / "SKILL.md"
        if not skill_file.exists():
            continue
        meta, _ = _read_markdown(skill_file)
        skills.append(
            ClaudeSkill(
                name=str(meta.get("name") or skill_dir.name),
                source_dir=skill_dir,
                description=_as_str(meta.get("description")),
                skill_path=skill_file,
            )
        )
    return skills


def load_hooks(root: Path) -> Optional[Dict[str, List[Any]]]:
    hooks_file = root / "hooks" / "hooks.json"
    if not hooks_file.exists():
        return None

    data = _read_json(hooks_file)
    if not isinstance(data, dict):
        raise PluginLoadError(f"Hooks file {hooks_file} must be a JSON object")
    hooks = data.get("hooks", {})
    if not isinstance(hooks, dict):
        raise PluginLoadError(f"'hooks' in {hooks_file} must be a JSON object")
    return hooks


def load_mcp_servers(root: Path) -> Optional[Dict[str, McpServer]]:
    mcp_file = root / ".mcp.json"
    if not mcp_file.exists():
        return None

    data = _read_json(mcp_file)
    if not isinstance(data, dict):
        raise PluginLoadError(f"MCP config {mcp_file} must be a JSON object")
    servers = data.get("mcpServers", data)
    if not isinstance(servers, dict):
        raise PluginLoadError(f"'mcpServers' in {mcp_file} must be a JSON object")

    result: Dict[str, McpServer] = {}
    for name, server in servers.items():
        if not isinstance(server, dict):
            raise PluginLoadError(f"MCP server '{name}' in {mcp_file} must be a JSON object")
        result[name] = McpServer(
            command=server.get("command"),
            args=server.get("args"),
            env=server.get("env"),
            url=server.get("url"),
            headers=server.get("headers"),
        )
    return result


def load_claude_plugin(path: Path) -> ClaudePlugin:
    """
    Read a whole plugin from disk.

    Args:
        path: Plugin root (the directory containing .claude-plugin/)

    Returns:
        ClaudePlugin with every section loaded in sorted file order.

    Raises:
        PluginLoadError: missing manifest or malformed JSON/YAML.
    """
    root = Path(path).resolve()
    if not root.is_dir():
        raise PluginLoadError(f"Plugin directory not found: {root}")

    return ClaudePlugin(
        root=root,
        manifest=load_manifest(root),
        agents=load_agents(root),
        commands=load_commands(root),
        skills=load_skills(root),
        hooks=load_hooks(root),
        mcp_servers=load_mcp_servers(root),
    )
