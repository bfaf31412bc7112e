"""Helpers for reading the generic element tree.

The tree adapter cannot tell a repeating element from a single one until it
actually repeats, so every element may arrive as a scalar, a dict or a list.
These helpers are the only place that deals with that.
"""

from typing import Any

from .tree import CONTENT_KEY


def as_list(node: Any) -> list:
    """
    Normalize a possibly-repeating element to a list.

    Args:
        node: Element value from the tree

    Returns:
        [] when absent, the items in source order when repeated,
        [node] otherwise
    """
    if node is None:
        return []
    if isinstance(node, list):
        return list(node)
    return [node]


def child(node: Any, *path: str) -> Any:
    """
    Walk down the tree by element names.

    A missing element or a non-element value on the way yields None.
    A repeated element met on the way is entered at its first occurrence.
    """
    for name in path:
        if isinstance(node, list):
            node = node[0] if node else None
        if not isinstance(node, dict):
            return None
        node = node.get(name)
    return node


def text(node: Any) -> str:
    """Text of an element, '' when absent or not text-bearing."""
    if isinstance(node, str):
        return node
    if isinstance(node, dict):
        value = node.get(CONTENT_KEY)
        return value if isinstance(value, str) else ""
    if isinstance(node, list):
        return text(node[0]) if node else ""
    return ""


def text_list(node: Any) -> list[str]:
    """Texts of a possibly-repeating element, e.g. address lines."""
    return [text(item) for item in as_list(node)]


def pick_date(node: Any) -> str:
    """Date-time (DtTm) of a date choice element, else its date (Dt), else ''."""
    return text(child(node, "DtTm")) or text(child(node, "Dt"))


def is_element(node: Any) -> bool:
    """True for an element that has content of its own (attributes or children)."""
    return isinstance(node, dict) and bool(node)


def location(*steps: str) -> str:
    return "/".join(step for step in steps if step)
