"""Tests for the target registry."""

from pathlib import Path

from plugin_bridge.core.converter import BaseTarget, TargetRegistry, target_registry
from plugin_bridge.core.types import TargetFormat, WriteResult


def test_all_targets_registered() -> None:
    assert target_registry.names() == ["cursor"]


def test_get_target_by_name() -> None:
    target = target_registry.get("cursor")

    assert target is not None
    assert target.format_info.name == "cursor"


def test_get_target_case_insensitive() -> None:
    target = target_registry.get("Cursor")

    assert target is not None
    assert target.name == "cursor"


def test_target_has_format_info() -> None:
    for target in target_registry.all():
        info = target.format_info

        assert info.name
        assert info.display_name
        assert info.output_dir
        assert info.status in ["stable", "beta", "experimental"]


def test_get_unknown_target_returns_none() -> None:
    assert target_registry.get("nonexistent") is None


def test_register_custom_target() -> None:
    class EchoTarget(BaseTarget):
        @property
        def format_info(self) -> TargetFormat:
            return TargetFormat(name="echo", display_name="Echo", output_dir=".echo")

        def convert(self, plugin, options):
            return [agent.name for agent in plugin.agents]

        def write(self, output_root: Path, bundle) -> WriteResult:
            return WriteResult(rules=len(bundle))

    registry = TargetRegistry()
    registry.register(EchoTarget)

    target = registry.get("echo")
    assert registry.names() == ["echo"]
    assert target.checkbox_label == "Echo (.echo/)"
    assert target_registry.get("echo") is None
