"""Shared fixtures for tests."""

import json
from pathlib import Path

import pytest

from plugin_bridge.core.types import (
    ClaudeAgent,
    ClaudeCommand,
    ClaudePlugin,
    ClaudeSkill,
    ConvertOptions,
    PluginManifest,
)


@pytest.fixture
def default_options() -> ConvertOptions:
    return ConvertOptions(agent_mode="subagent", infer_temperature=False, permissions="none")


@pytest.fixture
def fixture_plugin() -> ClaudePlugin:
    """One agent, one namespaced command, one skill, no hooks or MCP servers."""
    return ClaudePlugin(
        root=Path("/tmp/plugin"),
        manifest=PluginManifest(name="fixture", version="1.0.0"),
        agents=[
            ClaudeAgent(
                name="Security Reviewer",
                description="Security-focused code review agent",
                capabilities=["Threat modeling", "OWASP"],
                model="claude-sonnet-4-20250514",
                body="Focus on vulnerabilities.",
                source_path=Path("/tmp/plugin/agents/security-reviewer.md"),
            )
        ],
        commands=[
            ClaudeCommand(
                name="workflows:plan",
                description="Planning command",
                argument_hint="[FOCUS]",
                model="inherit",
                allowed_tools=["Read"],
                body="Plan the work.",
                source_path=Path("/tmp/plugin/commands/workflows/plan.md"),
            )
        ],
        skills=[
            ClaudeSkill(
                name="existing-skill",
                description="Existing skill",
                source_dir=Path("/tmp/plugin/skills/existing-skill"),
                skill_path=Path("/tmp/plugin/skills/existing-skill/SKILL.md"),
            )
        ],
        hooks=None,
        mcp_servers=None,
    )


@pytest.fixture
def plugin_dir(tmp_path) -> Path:
    """Create a minimal Claude plugin directory on disk."""
    root = tmp_path / "compound-engineering"
    (root / ".claude-plugin").mkdir(parents=True)
    (root / ".claude-plugin" / "plugin.json").write_text(
        json.dumps({"name": "compound-engineering", "version": "2.1.0", "description": "Fixture plugin"}),
        encoding="utf-8",
    )

    (root / "agents" / "review").mkdir(parents=True)
    (root / "agents" / "review" / "security-sentinel.md").write_text(
        "---\n"
        "name: security-sentinel\n"
        "description: Finds security issues\n"
        "model: inherit\n"
        "---\n"
        "\n"
        "Check ~/.claude/settings.json and ask @data-integrity-guardian.\n",
        encoding="utf-8",
    )
    (root / "agents" / "planner.md").write_text(
        "# Planner\n\nPlan things.\n",
        encoding="utf-8",
    )

    (root / "commands" / "workflows").mkdir(parents=True)
    (root / "commands" / "workflows" / "plan.md").write_text(
        "---\n"
        "description: Create a plan\n"
        "argument-hint: \"[feature]\"\n"
        "allowed-tools: Read, Grep\n"
        "---\n"
        "\n"
        "- Task repo-research-analyst(feature_description)\n"
        "Then run /workflows:work.\n",
        encoding="utf-8",
    )
    (root / "commands" / "changelog.md").write_text("Write the changelog.\n", encoding="utf-8")

    skill_dir = root / "skills" / "frontend-design"
    (skill_dir / "references").mkdir(parents=True)
    (skill_dir / "SKILL.md").write_text(
        "---\nname: frontend-design\ndescription: Build polished UIs\n---\n\n# Frontend Design\n",
        encoding="utf-8",
    )
    (skill_dir / "references" / "palette.md").write_text("# Palette\n", encoding="utf-8")

    (root / "hooks").mkdir()
    (root / "hooks" / "hooks.json").write_text(
        json.dumps(
            {"hooks": {"PreToolUse": [{"matcher": "Bash", "hooks": [{"type": "command", "command": "echo test"}]}]}}
        ),
        encoding="utf-8",
    )

    (root / ".mcp.json").write_text(
        json.dumps(
            {
                "mcpServers": {
                    "context7": {"url": "https://mcp.context7.com/mcp"},
                    "playwright": {"command": "npx", "args": ["-y", "@playwright/mcp@latest"]},
                }
            }
        ),
        encoding="utf-8",
    )
    return root
