"""
Business logic for 'plugin-bridge convert'.

Steps: 1) Load the Claude plugin from disk
       2) Convert it for each selected target (pure, in memory)
       3) Hand each bundle to that target's writer
"""

from pathlib import Path
from typing import Dict, List, Optional

from plugin_bridge.core.converter import TargetRegistry, target_registry
from plugin_bridge.core.loader import load_claude_plugin
from plugin_bridge.core.types import ConvertOptions, WriteResult
from plugin_bridge.utils import Colors


def run_convert(
    plugin_path: Path,
    output_root: Path,
    target_names: List[str],
    options: Optional[ConvertOptions] = None,
    verbose: bool = True,
    registry: TargetRegistry = target_registry,
) -> Dict[str, WriteResult]:
    """
    Convert one plugin for several targets.

    Args:
        plugin_path: Plugin root containing .claude-plugin/plugin.json
        output_root: Where target directories (.cursor/, ...) are created
        target_names: Registered target names, e.g. ["cursor"]
        options: Target options; defaults to ConvertOptions()
        verbose: Print progress

    Returns:
        Dict {target_name: WriteResult}

    Raises:
        PluginLoadError: the plugin could not be read
        KeyError: an unknown target name was requested
    """
    options = options or ConvertOptions()

    unknown = [name for name in target_names if registry.get(name) is None]
    if unknown:
        raise KeyError(f"Unknown target(s): {', '.join(unknown)}")

    plugin = load_claude_plugin(plugin_path)
    if verbose:
        print(
            f"Loaded plugin {Colors.BOLD}{plugin.manifest.name}{Colors.ENDC}: "
            f"{len(plugin.agents)} agents, {len(plugin.commands)} commands, {len(plugin.skills)} skills"
        )

    results: Dict[str, WriteResult] = {}
    for name in target_names:
        target = registry.get(name)
        if verbose:
            print(f"\n{Colors.CYAN}Converting to {target.display_name}...{Colors.ENDC}")
        bundle = target.convert(plugin, options)
        results[target.name] = target.write(output_root, bundle)

    return results
