"""CAMT.053 statement reading: tree adapter and structural mappers."""

from .base import TreeAdapter
from .reader import parse_camt053
from .statement import map_document
from .tree import LxmlTreeAdapter, xml_to_tree

__all__ = [
    "TreeAdapter",
    "LxmlTreeAdapter",
    "map_document",
    "parse_camt053",
    "xml_to_tree",
]
