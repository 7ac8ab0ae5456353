import json
import shutil
from datetime import datetime
from pathlib import Path
from typing import Any, Dict


# ANSI colors
class Colors:
    HEADER = "\033[95m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BOLD = "\033[1m"
    ENDC = "\033[0m"


def ask_user(question: str, default: bool = True) -> bool:
    """
    Prompts the user with a yes/no question.

    Args:
        question: The question to ask.
        default: True for [Y/n] (default yes), False for [y/N] (default no).

    Returns:
        True if user confirmed, False otherwise.
    """
    choices = " [Y/n]: " if default else " [y/N]: "

    while True:
        print(f"{Colors.YELLOW}❓ {question}{choices}{Colors.ENDC}", end="", flush=True)
        try:
            choice = input().strip().lower()
        except EOFError:
            return default
        if not choice:
            return default
        if choice in ["y", "yes"]:
            return True
        if choice in ["n", "no"]:
            return False


# =============================================================================
# FILE UTILITIES
# =============================================================================


def write_text(path: Path, content: str) -> None:
    """Write UTF-8 text, creating parent directories. Ensures a trailing newline."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if not content.endswith("\n"):
        content += "\n"
    path.write_text(content, encoding="utf-8")


def write_json(path: Path, data: Dict[str, Any]) -> None:
    """Write JSON with 2-space indent, creating parent directories."""
    write_text(path, json.dumps(data, indent=2, ensure_ascii=False))


def backup_file(path: Path) -> Path | None:
    """Copy an existing file to <name>.bak.<timestamp>. Returns the backup path."""
    if not path.exists():
        return None
    stamp = datetime.now().strftime("%Y%m%d%H%M%S")
    backup = path.with_name(f"{path.name}.bak.{stamp}")
    shutil.copy2(path, backup)
    return backup


def copy_dir(src: Path, dest: Path) -> None:
    """Copy a directory tree, merging into `dest` if it already exists."""
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copytree(src, dest, dirs_exist_ok=True)
