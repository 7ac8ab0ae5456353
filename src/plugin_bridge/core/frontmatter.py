"""YAML frontmatter helpers for markdown documents."""

import re
from typing import Any, Dict, Tuple

import yaml

_RE_FRONTMATTER = re.compile(r"^---\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|$)", re.DOTALL)


def format_frontmatter(data: Dict[str, Any], body: str) -> str:
    """
    Render `data` as a YAML frontmatter block followed by `body`.

    Keys keep insertion order. An empty mapping yields the body alone.
    """
    if not data:
        return body
    fm_str = yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False, width=1000)
    return f"---\n{fm_str}---\n\n{body}\n"


def parse_frontmatter(content: str) -> Tuple[Dict[str, Any], str]:
    """
    Split a markdown document into (frontmatter dict, body).

    Documents without frontmatter return ({}, content). Raises yaml.YAMLError
    for a block that is not valid YAML.
    """
    match = _RE_FRONTMATTER.match(content)
    if not match:
        return {}, content

    data = yaml.safe_load(match.group(1))
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise yaml.YAMLError("frontmatter must be a YAML mapping")

    body = content[match.end():].lstrip("\r\n")
    return data, body
