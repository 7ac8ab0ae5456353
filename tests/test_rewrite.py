"""Tests for the content rewrite rules."""

from plugin_bridge.core.rewrite import (
    RewriteTable,
    rewrite_agent_refs,
    rewrite_config_paths,
    rewrite_content,
    rewrite_slash_commands,
    rewrite_task_calls,
)

TABLE = RewriteTable(target_dir_name="cursor")


# =============================================================================
# TASK CALLS
# =============================================================================


def test_task_calls_keep_bullet_and_indent() -> None:
    body = "Run agents:\n\n- Task repo-research-analyst(feature_description)\n  - Task learnings-researcher( topic )"

    result = rewrite_task_calls(body, TABLE.task_template)

    assert "- Use the repo-research-analyst skill to: feature_description" in result
    assert "  - Use the learnings-researcher skill to: topic" in result
    assert "Task " not in result


def test_task_call_without_prefix() -> None:
    result = rewrite_task_calls("Task best-practices-researcher(topic)", TABLE.task_template)
    assert result == "Use the best-practices-researcher skill to: topic"


def test_task_call_mid_sentence_is_untouched() -> None:
    body = "Spawn a Task repo-analyst(x) here"
    assert rewrite_task_calls(body, TABLE.task_template) == body


def test_task_call_uses_custom_template() -> None:
    result = rewrite_task_calls("Task foo-agent(bar)", "{prefix}Ask {name}: {args}")
    assert result == "Ask foo-agent: bar"


# =============================================================================
# SLASH COMMANDS
# =============================================================================


def test_slash_commands_are_flattened() -> None:
    body = "1. Run /deepen-plan to enhance\n2. Start /workflows:work to implement\n3. File at /tmp/output.md"

    result = rewrite_slash_commands(body)

    assert "/deepen-plan" in result
    assert "/work to implement" in result
    assert "/workflows:work" not in result
    assert "/tmp/output.md" in result


def test_reserved_roots_are_not_rewritten() -> None:
    for root in ["dev", "tmp", "etc", "usr", "var", "bin", "home"]:
        body = f"Look in /{root} first."
        assert rewrite_slash_commands(body) == body


def test_urls_and_mid_path_segments_are_untouched() -> None:
    body = "See https://example.com/docs and src/app/main.py."
    assert rewrite_slash_commands(body) == body


def test_slash_command_at_end_and_in_backticks() -> None:
    assert rewrite_slash_commands("run `/ns:review`") == "run `/review`"
    assert rewrite_slash_commands("then /ns:ship") == "then /ship"


def test_file_paths_are_byte_identical() -> None:
    body = "/tmp/output.md"
    assert rewrite_slash_commands(body) == body


# =============================================================================
# CONFIG PATHS
# =============================================================================


def test_home_and_relative_config_paths() -> None:
    body = "Global config at ~/.claude/settings.json and `.claude/foo.md` locally."

    result = rewrite_config_paths(body, "claude", "cursor")

    assert "~/.cursor/settings.json" in result
    assert ".cursor/foo.md" in result
    assert ".claude/" not in result


def test_config_dir_without_trailing_slash_is_kept() -> None:
    body = "The .claude directory"
    assert rewrite_config_paths(body, "claude", "cursor") == body


# =============================================================================
# AGENT REFERENCES
# =============================================================================


def test_agent_refs_become_rule_phrases() -> None:
    body = "Have @security-sentinel and @dhh-rails-reviewer check the code."

    result = rewrite_agent_refs(body, TABLE.agent_ref_template)

    assert "the security-sentinel rule" in result
    assert "the dhh-rails-reviewer rule" in result
    assert "@security-sentinel" not in result


def test_agent_refs_are_normalized_case_insensitively() -> None:
    assert rewrite_agent_refs("ping @Data-Analyst now", TABLE.agent_ref_template) == "ping the data-analyst rule now"


def test_unknown_role_suffix_is_untouched() -> None:
    body = "Email @john-doe or @team"
    assert rewrite_agent_refs(body, TABLE.agent_ref_template) == body


# =============================================================================
# PIPELINE
# =============================================================================


def test_rewrite_content_applies_all_rules_in_order() -> None:
    body = (
        "- Task repo-research-analyst(feature_description)\n"
        "Run /workflows:work, read .claude/notes.md, then ask @security-sentinel."
    )

    result = rewrite_content(body, TABLE)

    assert result == (
        "- Use the repo-research-analyst skill to: feature_description\n"
        "Run /work, read .cursor/notes.md, then ask the security-sentinel rule."
    )


def test_rewrite_content_is_deterministic() -> None:
    body = "Task a-agent(x)\n/ns:cmd ~/.claude/y @b-oracle"
    assert rewrite_content(body, TABLE) == rewrite_content(body, TABLE)


def test_rewrite_content_plain_text_unchanged() -> None:
    body = "Nothing to see here.\n\nJust prose."
    assert rewrite_content(body, TABLE) == body
