"""
Cursor AI Converter
Converts a Claude Code plugin to Cursor format.

Output structure:
- .cursor/rules/*.mdc (one rule per agent, MDC frontmatter)
- .cursor/commands/*.md (plain markdown, no frontmatter)
- .cursor/skills/<skill-name>/ (copied verbatim)
- .cursor/mcp.json (MCP configuration)

Reference: https://cursor.com/docs/context/rules
MDC Format: description, globs, alwaysApply frontmatter
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

from plugin_bridge.core.frontmatter import format_frontmatter
from plugin_bridge.core.mcp import convert_mcp_servers
from plugin_bridge.core.naming import flatten_command_name, normalize_name, unique_name
from plugin_bridge.core.policy import warn_unsupported_features
from plugin_bridge.core.rewrite import RewriteTable, rewrite_content
from plugin_bridge.core.types import (
    ClaudeAgent,
    ClaudeCommand,
    ClaudePlugin,
    ConvertOptions,
    TargetFormat,
    WriteResult,
)
from plugin_bridge.utils import backup_file, copy_dir, write_json, write_text

CURSOR_FORMAT = TargetFormat(
    name="cursor",
    display_name="Cursor",
    output_dir=".cursor",
    checkbox_label="Cursor (.cursor/)",
    status="beta",
    supports_hooks=False,
)

CURSOR_REWRITES = RewriteTable(
    target_dir_name="cursor",
    task_template="{prefix}Use the {name} skill to: {args}",
    agent_ref_template="the {name} rule",
)


# =============================================================================
# BUNDLE TYPES
# =============================================================================


@dataclass
class CursorRule:
    name: str
    content: str


@dataclass
class CursorCommand:
    name: str
    content: str


@dataclass
class CursorSkillDir:
    name: str
    source_dir: Path


@dataclass
class CursorBundle:
    rules: List[CursorRule] = field(default_factory=list)
    commands: List[CursorCommand] = field(default_factory=list)
    skill_dirs: List[CursorSkillDir] = field(default_factory=list)
    mcp_servers: Optional[Dict[str, Dict[str, Any]]] = None


# =============================================================================
# CONVERSION FUNCTIONS
# =============================================================================


def transform_content_for_cursor(body: str) -> str:
    return rewrite_content(body, CURSOR_REWRITES)


def convert_agent_to_rule(agent: ClaudeAgent, used_names: Set[str]) -> CursorRule:
    """Agent -> .mdc rule. Fields Cursor has no place for (model) are dropped."""
    name = unique_name(normalize_name(agent.name), used_names)
    description = agent.description if agent.description is not None else f"Converted from Claude agent {agent.name}"

    # Rules are agent-requested only: never auto-attached by glob or always applied
    frontmatter = {
        "description": description,
        "globs": "",
        "alwaysApply": False,
    }

    body = transform_content_for_cursor(agent.body.strip())
    if agent.capabilities:
        capabilities = "\n".join(f"- {c}" for c in agent.capabilities)
        body = f"## Capabilities\n{capabilities}\n\n{body}".strip()
    if not body:
        body = f"Instructions converted from the {agent.name} agent."

    return CursorRule(name=name, content=format_frontmatter(frontmatter, body))


def convert_command(command: ClaudeCommand, used_names: Set[str]) -> CursorCommand:
    """Command -> plain markdown. Cursor commands carry no frontmatter, so the
    description becomes an HTML comment and allowed_tools/model are dropped."""
    name = unique_name(flatten_command_name(command.name), used_names)

    sections = []
    if command.description:
        sections.append(f"<!-- {command.description} -->")
    if command.argument_hint:
        sections.append(f"## Arguments\n{command.argument_hint}")
    sections.append(transform_content_for_cursor(command.body.strip()))

    content = "\n\n".join(s for s in sections if s).strip()
    return CursorCommand(name=name, content=content)


def convert_claude_to_cursor(plugin: ClaudePlugin, options: ConvertOptions) -> CursorBundle:
    """
    Build a CursorBundle from a plugin. Pure: no I/O besides the hook warning.

    `options` is accepted for the shared target contract; Cursor has no use
    for agent mode, temperature or permission settings.
    """
    used_rule_names: Set[str] = set()
    used_command_names: Set[str] = set()

    rules = [convert_agent_to_rule(agent, used_rule_names) for agent in plugin.agents]

    # Reserve skill names so command name flattening doesn't collide
    skill_dirs = []
    for skill in plugin.skills:
        skill_name = normalize_name(skill.name)
        used_command_names.add(skill_name)
        skill_dirs.append(CursorSkillDir(name=skill_name, source_dir=skill.source_dir))

    commands = [convert_command(command, used_command_names) for command in plugin.commands]

    mcp_servers = convert_mcp_servers(plugin.mcp_servers)

    warn_unsupported_features(plugin, CURSOR_FORMAT)

    return CursorBundle(
        rules=rules,
        commands=commands,
        skill_dirs=skill_dirs,
        mcp_servers=mcp_servers,
    )


# =============================================================================
# WRITER
# =============================================================================


def resolve_cursor_root(output_root: Path) -> Path:
    """Write into `output_root` directly when it already is a .cursor dir."""
    if output_root.name == CURSOR_FORMAT.output_dir:
        return output_root
    return output_root / CURSOR_FORMAT.output_dir


def _is_safe_dir_name(name: str) -> bool:
    """A single path segment that stays inside its parent directory."""
    return bool(name) and name not in (".", "..") and "/" not in name and "\\" not in name


def write_cursor_bundle(output_root: Path, bundle: CursorBundle, verbose: bool = False) -> WriteResult:
    """
    Write a CursorBundle to disk.

    Args:
        output_root: Project root (or a .cursor/ directory)
        bundle: Result of convert_claude_to_cursor
        verbose: Print one line per written artifact

    Returns:
        WriteResult with counts; failures are collected in `errors`
    """
    result = WriteResult()
    cursor_root = resolve_cursor_root(Path(output_root))

    for rule in bundle.rules:
        try:
            write_text(cursor_root / "rules" / f"{rule.name}.mdc", rule.content)
            result.rules += 1
            if verbose:
                print(f"  ✓ rules/{rule.name}.mdc")
        except OSError as e:
            result.errors.append(f"rule:{rule.name}: {e}")

    for command in bundle.commands:
        try:
            write_text(cursor_root / "commands" / f"{command.name}.md", command.content)
            result.commands += 1
            if verbose:
                print(f"  ✓ commands/{command.name}.md")
        except OSError as e:
            result.errors.append(f"command:{command.name}: {e}")

    for skill in bundle.skill_dirs:
        if not _is_safe_dir_name(skill.name):
            result.errors.append(f"skill:{skill.name}: unsafe directory name")
            continue
        try:
            copy_dir(Path(skill.source_dir), cursor_root / "skills" / skill.name)
            result.skills += 1
            if verbose:
                print(f"  ✓ skills/{skill.name}/")
        except OSError as e:
            result.errors.append(f"skill:{skill.name}: {e}")

    if bundle.mcp_servers is not None:
        mcp_path = cursor_root / "mcp.json"
        try:
            backup = backup_file(mcp_path)
            if backup:
                result.warnings.append(f"Backed up existing mcp.json to {backup.name}")
            write_json(mcp_path, {"mcpServers": bundle.mcp_servers})
            result.mcp_servers = len(bundle.mcp_servers)
            if verbose:
                print(f"  ✓ mcp.json ({result.mcp_servers} servers)")
        except OSError as e:
            result.errors.append(f"mcp: {e}")

    return result
