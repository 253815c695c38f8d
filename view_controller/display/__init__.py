"""
Display tree for View Controller

A minimal document of nodes that views are inserted into. Render targets
resolve to nodes of this tree.
"""

from .schemas import NodeSummary
from .tree import Document, Node, get_document, reset_document

__all__ = [
    "Document",
    "Node",
    "NodeSummary",
    "get_document",
    "reset_document",
]
