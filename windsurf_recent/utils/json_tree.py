"""Total accessors over decoded JSON values.

Every helper returns None instead of raising when a key is missing or a node has
an unexpected type, so lookups can be chained and short-circuit on the first miss.
"""

from __future__ import annotations

from typing import Any, Optional


def get_field(node: Any, key: str) -> Optional[Any]:
    if not isinstance(node, dict):
        return None
    return node.get(key)


def get_path(node: Any, *keys: str) -> Optional[Any]:
    current = node
    for key in keys:
        current = get_field(current, key)
        if current is None:
            return None
    return current


def as_dict(value: Any) -> Optional[dict[str, Any]]:
    return value if isinstance(value, dict) else None


def as_list(value: Any) -> Optional[list[Any]]:
    return value if isinstance(value, list) else None


def as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def get_str(node: Any, key: str) -> Optional[str]:
    return as_str(get_field(node, key))
