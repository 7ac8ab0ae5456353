"""
Name normalization and per-run collision handling.

Every output artifact name goes through here so that two targets (or two
runs) always agree on the same slug for the same input.
"""

import re
from typing import Set

FALLBACK_NAME = "item"

_RE_PATH_SEPARATORS = re.compile(r"[\\/]+")
_RE_COLON_OR_SPACE = re.compile(r"[:\s]+")
_RE_INVALID_CHARS = re.compile(r"[^a-z0-9_-]+")
_RE_HYPHEN_RUN = re.compile(r"-+")


def normalize_name(value: str) -> str:
    """
    Turn any display name into a slug of [a-z0-9_-].

    "Security Reviewer" -> "security-reviewer"
    "tools/Lint Check"  -> "tools-lint-check"
    ""                  -> "item"
    """
    trimmed = value.strip()
    if not trimmed:
        return FALLBACK_NAME

    normalized = trimmed.lower()
    normalized = _RE_PATH_SEPARATORS.sub("-", normalized)
    normalized = _RE_COLON_OR_SPACE.sub("-", normalized)
    normalized = _RE_INVALID_CHARS.sub("-", normalized)
    normalized = _RE_HYPHEN_RUN.sub("-", normalized)
    normalized = normalized.strip("-")
    return normalized or FALLBACK_NAME


def flatten_command_name(name: str) -> str:
    """Keep only the last namespace segment: workflows:plan -> plan."""
    return normalize_name(name.split(":")[-1])


def unique_name(base: str, used: Set[str]) -> str:
    """
    Reserve `base` in `used`, or the first free `base-N` (N starting at 2).

    `used` belongs to one conversion run and one namespace; the caller owns it.
    """
    if base not in used:
        used.add(base)
        return base

    index = 2
    while f"{base}-{index}" in used:
        index += 1
    name = f"{base}-{index}"
    used.add(name)
    return name
