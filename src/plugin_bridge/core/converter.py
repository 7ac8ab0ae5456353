"""
Target base class and registry.
Adding a new tool = implement BaseTarget (convert + write) + register.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

from .types import ClaudePlugin, ConvertOptions, TargetFormat, WriteResult


class BaseTarget(ABC):
    @property
    @abstractmethod
    def format_info(self) -> TargetFormat: ...

    @abstractmethod
    def convert(self, plugin: ClaudePlugin, options: ConvertOptions) -> Any:
        """Pure, in-memory conversion of a plugin into this target's bundle."""

    @abstractmethod
    def write(self, output_root: Path, bundle: Any) -> WriteResult:
        """Write a bundle produced by `convert` under `output_root`."""

    @property
    def name(self) -> str:
        return self.format_info.name

    @property
    def display_name(self) -> str:
        return self.format_info.display_name

    @property
    def checkbox_label(self) -> str:
        return self.format_info.checkbox_label or f"{self.display_name} ({self.format_info.output_dir}/)"


class TargetRegistry:
    """
    Maps a target name ("cursor") to one BaseTarget instance.
    The CLI and services dispatch through this, never on target names directly.
    """

    def __init__(self):
        self._targets: Dict[str, BaseTarget] = {}

    def register(self, target_class: Type[BaseTarget]) -> None:
        instance = target_class()
        self._targets[instance.name] = instance

    def get(self, name: str) -> Optional[BaseTarget]:
        return self._targets.get(name.lower())

    def all(self) -> List[BaseTarget]:
        return list(self._targets.values())

    def names(self) -> List[str]:
        return list(self._targets.keys())


target_registry = TargetRegistry()
