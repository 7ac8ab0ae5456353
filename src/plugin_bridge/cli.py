"""
CLI entry point — thin dispatcher only.

Parse args -> call service -> print results.
"""

import argparse
import sys
from pathlib import Path

from plugin_bridge.utils import Colors, ask_user


def main():
    try:
        sys.exit(_main())
    except KeyboardInterrupt:
        print(f"\n{Colors.YELLOW}Cancelled.{Colors.ENDC}")
        sys.exit(130)


def _build_parser(registry) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plugin-bridge",
        description="Plugin Bridge - Convert Claude Code plugins for other AI tools",
    )
    sub = parser.add_subparsers(dest="command", help="Command")

    # --- convert ---
    p_convert = sub.add_parser("convert", help="Convert a Claude plugin")
    p_convert.add_argument("plugin", help="Plugin directory (contains .claude-plugin/)")
    p_convert.add_argument(
        "--to", dest="targets", action="append", choices=registry.names(), help="Target format (repeatable)"
    )
    p_convert.add_argument("--all", action="store_true", help="Convert to every target")
    p_convert.add_argument("--output", "-o", default=".", help="Output root")
    p_convert.add_argument("--force", "-f", action="store_true", help="Overwrite without asking")
    p_convert.add_argument("--agent-mode", choices=["primary", "subagent"], default="subagent")
    p_convert.add_argument("--infer-temperature", action="store_true")
    p_convert.add_argument("--permissions", choices=["none", "broad", "from-commands"], default="none")

    # --- list ---
    sub.add_parser("list", help="List supported targets")

    return parser


def _main(argv=None) -> int:
    # Import converters so they register themselves
    from plugin_bridge import converters  # noqa: F401
    from plugin_bridge.core.converter import target_registry

    parser = _build_parser(target_registry)
    args = parser.parse_args(argv)

    if args.command == "convert":
        return _handle_convert(args, target_registry)
    if args.command == "list":
        return _handle_list(target_registry)

    parser.print_help()
    return 0


def _is_interactive() -> bool:
    return sys.stdin.isatty()


def _get_selected_targets(args, registry) -> list:
    """Pick targets from flags, the TUI, or fall back to all of them."""
    if args.all:
        return registry.names()
    if args.targets:
        return list(dict.fromkeys(args.targets))
    if _is_interactive() and not args.force:
        from plugin_bridge.tui import select_targets

        return select_targets(registry)
    return registry.names()


def _handle_convert(args, registry) -> int:
    from plugin_bridge.core.loader import PluginLoadError
    from plugin_bridge.core.types import ConvertOptions
    from plugin_bridge.services.convert_service import run_convert

    targets = _get_selected_targets(args, registry)
    if not targets:
        print(f"{Colors.YELLOW}No target selected.{Colors.ENDC}")
        return 1

    output_root = Path(args.output).resolve()
    if not args.force:
        existing = [
            registry.get(name).format_info.output_dir
            for name in targets
            if (output_root / registry.get(name).format_info.output_dir).exists()
        ]
        if existing and not ask_user(f"Found existing {', '.join(existing)}. Update?", default=True):
            print(f"{Colors.YELLOW}Skipped.{Colors.ENDC}")
            return 0

    options = ConvertOptions(
        agent_mode=args.agent_mode,
        infer_temperature=args.infer_temperature,
        permissions=args.permissions,
    )

    print(f"{Colors.HEADER}Converting plugin {args.plugin}...{Colors.ENDC}")
    try:
        results = run_convert(Path(args.plugin), output_root, targets, options, verbose=True)
    except PluginLoadError as e:
        print(f"{Colors.RED}Error: {e}{Colors.ENDC}")
        return 1

    exit_code = 0
    for name, result in results.items():
        for warning in result.warnings:
            print(f"  {Colors.YELLOW}{warning}{Colors.ENDC}")
        if result.ok:
            print(
                f"{Colors.GREEN}{name}: {result.rules} rules, {result.commands} commands, "
                f"{result.skills} skills, {result.mcp_servers} MCP servers{Colors.ENDC}"
            )
        else:
            exit_code = 1
            print(f"{Colors.RED}{name}: {len(result.errors)} errors{Colors.ENDC}")
            for error in result.errors:
                print(f"  {Colors.RED}✗ {error}{Colors.ENDC}")
    return exit_code


def _handle_list(registry) -> int:
    print(f"{Colors.HEADER}Supported targets:{Colors.ENDC}")
    for target in registry.all():
        info = target.format_info
        print(f"  {Colors.BOLD}{info.name:<10}{Colors.ENDC} {info.display_name} ({info.output_dir}/) [{info.status}]")
    return 0


if __name__ == "__main__":
    main()
