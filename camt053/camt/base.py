"""Base protocol for XML tree adapters."""

from typing import Protocol


class TreeAdapter(Protocol):
    """Protocol for turning message text into a generic element tree."""

    name: str
    """Human-readable name of the adapter (e.g., 'lxml')."""

    def parse(self, xml: str | bytes) -> dict:
        """
        Parse message text into a nested element tree.

        The tree follows these conventions: attributes are merged into their
        element as sibling keys, a repeating element becomes a list, a
        non-repeating one stays a scalar or dict, and the text of an element
        that also has attributes or children is stored under CONTENT_KEY
        ("_", see camt.tree).

        Args:
            xml: Full message content

        Returns:
            Dict with the root element's local name as its only key
        """
        ...
