"""
Content rewriting for agent and command bodies.

Each rule is a standalone pure function (str -> str) so it can be tested on
its own. `rewrite_content` runs them in a fixed order:

1. Task agent calls      "- Task foo-agent(args)"  -> "- Use the foo-agent skill to: args"
2. Slash command links   "/workflows:work"         -> "/work"
3. Config directory      "~/.claude/x", ".claude/x" -> "~/.cursor/x", ".cursor/x"
4. @agent mentions       "@security-sentinel"      -> "the security-sentinel rule"

Order matters: path rewrites run after slash links so ".claude/" segments are
never mistaken for commands, and mentions run last on the final text.
"""

import re
from dataclasses import dataclass

from .naming import flatten_command_name, normalize_name


@dataclass(frozen=True)
class RewriteTable:
    """Per-target idioms used by the rewrite rules."""
    target_dir_name: str
    task_template: str = "{prefix}Use the {name} skill to: {args}"
    agent_ref_template: str = "the {name} rule"
    source_dir_name: str = "claude"


# =============================================================================
# PATTERNS
# =============================================================================

_RE_TASK_CALL = re.compile(r"^(\s*-?\s*)Task\s+([a-z][a-z0-9-]*)\(([^)]+)\)", re.MULTILINE)

# Not preceded by ":" or a word char, so "http://x" and "a/b" stay untouched.
_RE_SLASH_COMMAND = re.compile(r"(?<![:\w])/([a-z][a-z0-9_:-]*?)(?=[\s,.\"')\]}`]|$)", re.IGNORECASE)

# Single-segment tokens that are almost always real directories.
RESERVED_PATH_ROOTS = frozenset({"dev", "tmp", "etc", "usr", "var", "bin", "home"})

AGENT_ROLE_SUFFIXES = (
    "agent",
    "reviewer",
    "researcher",
    "analyst",
    "specialist",
    "oracle",
    "sentinel",
    "guardian",
    "strategist",
)

_RE_AGENT_REF = re.compile(
    r"@([a-z][a-z0-9-]*-(?:" + "|".join(AGENT_ROLE_SUFFIXES) + r"))",
    re.IGNORECASE,
)


# =============================================================================
# RULES
# =============================================================================


def rewrite_task_calls(body: str, template: str) -> str:
    """Replace `Task <agent>(<args>)` lines, keeping any bullet/indent prefix."""

    def _replace(match: re.Match) -> str:
        prefix, agent_name, args = match.groups()
        return template.format(prefix=prefix, name=normalize_name(agent_name), args=args.strip())

    return _RE_TASK_CALL.sub(_replace, body)


def rewrite_slash_commands(body: str) -> str:
    """Flatten namespaced `/ns:command` links; leave filesystem-looking paths alone."""

    def _replace(match: re.Match) -> str:
        command_name = match.group(1)
        if "/" in command_name:
            return match.group(0)
        if command_name in RESERVED_PATH_ROOTS:
            return match.group(0)
        return f"/{flatten_command_name(command_name)}"

    return _RE_SLASH_COMMAND.sub(_replace, body)


def rewrite_config_paths(body: str, source_dir_name: str, target_dir_name: str) -> str:
    """Point `~/.<source>/` and `.<source>/` at the target's hidden directory."""
    source = re.escape(source_dir_name)
    body = re.sub(rf"~/\.{source}/", f"~/.{target_dir_name}/", body)
    return re.sub(rf"\.{source}/", f".{target_dir_name}/", body)


def rewrite_agent_refs(body: str, template: str) -> str:
    """Turn `@foo-reviewer` style mentions into a phrase naming the target concept."""
    return _RE_AGENT_REF.sub(lambda m: template.format(name=normalize_name(m.group(1))), body)


def rewrite_content(body: str, table: RewriteTable) -> str:
    """Apply every rewrite rule, in order, for the given target table."""
    result = rewrite_task_calls(body, table.task_template)
    result = rewrite_slash_commands(result)
    result = rewrite_config_paths(result, table.source_dir_name, table.target_dir_name)
    result = rewrite_agent_refs(result, table.agent_ref_template)
    return result
