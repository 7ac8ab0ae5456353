"""
Best-effort downgrade of plugin features a target cannot express.

Unsupported features are dropped with exactly one warning each; conversion
never fails because of them.
"""

import logging
from typing import Callable, Dict, List

from .types import ClaudePlugin, TargetFormat

logger = logging.getLogger("plugin_bridge")

# feature -> is it present in the plugin?
_FEATURES: Dict[str, Callable[[ClaudePlugin], bool]] = {
    "hooks": lambda plugin: bool(plugin.hooks),
}

# feature -> can the target represent it?
_SUPPORT: Dict[str, Callable[[TargetFormat], bool]] = {
    "hooks": lambda fmt: fmt.supports_hooks,
}

_MESSAGES = {
    "hooks": "Warning: {display} does not support hooks. Hooks were skipped during conversion.",
}


def unsupported_features(plugin: ClaudePlugin, fmt: TargetFormat) -> List[str]:
    """Features present in `plugin` that `fmt` cannot represent, in a stable order."""
    return [
        feature
        for feature, is_present in _FEATURES.items()
        if is_present(plugin) and not _SUPPORT[feature](fmt)
    ]


def warn_unsupported_features(plugin: ClaudePlugin, fmt: TargetFormat) -> List[str]:
    """Log one warning per dropped feature. Returns the messages that were logged."""
    messages = []
    for feature in unsupported_features(plugin, fmt):
        message = _MESSAGES[feature].format(display=fmt.display_name)
        logger.warning(message)
        messages.append(message)
    return messages
