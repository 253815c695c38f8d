"""
Display tree for View Controller

Nodes form a single-parent tree rooted at the document's ``html`` node.
Views own at most one node each; inserting a node that already has a
parent moves it.
"""

import logging
from html import escape
from typing import Iterator, Optional

from .schemas import NodeSummary

logger = logging.getLogger(__name__)


class Node:
    """An element in the display tree."""

    def __init__(
        self,
        tag: str = "div",
        id: Optional[str] = None,
        classes: str = "",
        content: str = "",
    ):
        self.tag = tag
        self.id = id
        self.classes = classes
        self.content = content
        self.parent: Optional["Node"] = None
        self.children: list["Node"] = []

    def __repr__(self) -> str:
        return f"<Node {self.tag}#{self.id}>" if self.id else f"<Node {self.tag}>"

    def append(self, child: "Node") -> "Node":
        """Insert ``child`` as the last child of this node."""
        if child is self or child in self.ancestors():
            raise ValueError(f"Cannot insert {child!r} into its own subtree")
        if child.parent is not None:
            child.remove()
        child.parent = self
        self.children.append(child)
        return child

    def remove(self) -> None:
        """Detach this node from its parent; a detached node is left as is."""
        if self.parent is None:
            return
        self.parent.children.remove(self)
        self.parent = None

    def ancestors(self) -> Iterator["Node"]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def walk(self) -> Iterator["Node"]:
        """Depth-first iteration over this node and its descendants."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_html(self) -> str:
        attrs = ""
        if self.id:
            attrs += f' id="{escape(self.id)}"'
        if self.classes:
            attrs += f' class="{escape(self.classes)}"'
        inner = self.content + "".join(c.to_html() for c in self.children)
        return f"<{self.tag}{attrs}>{inner}</{self.tag}>"

    def summary(self) -> NodeSummary:
        return NodeSummary(
            id=self.id,
            tag=self.tag,
            classes=self.classes,
            children=[c.summary() for c in self.children],
        )


class Document:
    """Root of a display tree: an ``html`` node holding a ``body`` node."""

    def __init__(self):
        self.html = Node(tag="html")
        self.body = self.html.append(Node(tag="body"))

    def by_id(self, node_id: str) -> Optional[Node]:
        """Find a node attached to this document by its id attribute."""
        if not isinstance(node_id, str) or not node_id:
            return None
        for node in self.html.walk():
            if node.id == node_id:
                return node
        return None

    def contains(self, node: Node) -> bool:
        return node is self.html or self.html in node.ancestors()

    def to_html(self) -> str:
        return self.html.to_html()

    def clear(self) -> None:
        """Remove everything below ``body``."""
        for child in list(self.body.children):
            child.remove()
        logger.debug("Cleared document body")


# Global document instance
_document: Optional[Document] = None


def get_document() -> Document:
    """Get the global document instance."""
    global _document
    if _document is None:
        _document = Document()
    return _document


def reset_document() -> None:
    """Drop the global document; the next get_document() builds a fresh one."""
    global _document
    _document = None
