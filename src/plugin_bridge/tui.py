"""
Interactive prompts for plugin-bridge (questionary).
"""

from typing import List

import questionary
from questionary import Style

from plugin_bridge.core.converter import TargetRegistry

CUSTOM_STYLE = Style(
    [
        ("qmark", "fg:#00d4ff bold"),
        ("question", "bold"),
        ("answer", "fg:#00d4ff bold"),
        ("pointer", "fg:#00d4ff bold"),
        ("highlighted", "fg:#00d4ff bold bg:default"),
        ("selected", "fg:#00d4ff bold bg:default"),
        ("checkbox", "fg:#888888"),
        ("checkbox-selected", "fg:#00d4ff bold"),
    ]
)


def select_targets(registry: TargetRegistry) -> List[str]:
    """
    Ask which targets to convert to.

    Returns:
        Selected target names; empty list if the user cancelled.
    """
    choices = [
        questionary.Choice(target.checkbox_label, value=target.name, checked=True)
        for target in registry.all()
    ]
    selected = questionary.checkbox(
        "Convert plugin to:",
        choices=choices,
        style=CUSTOM_STYLE,
    ).ask()
    return selected or []
