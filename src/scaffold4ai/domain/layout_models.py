from __future__ import annotations

"""
Project Layout Data Models.

Provides the node type used to hold a proposed project structure in memory,
together with the glyph constants of the ASCII tree convention and small
read-only traversal helpers shared by the parser, mutator and renderer.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

# -----------------------------------------------------------------------------
# TREE DRAWING CONVENTION
# -----------------------------------------------------------------------------

DIR_SUFFIX = "/"
BRANCH_CONNECTOR = "├── "
LAST_CONNECTOR = "└── "
VERTICAL_BAR = "│"
INDENT_WIDTH = 4

INDENT_CONTINUATION = VERTICAL_BAR + " " * (INDENT_WIDTH - 1)
INDENT_BLANK = " " * INDENT_WIDTH

# Glyphs that mark a line as part of a tree drawing
TREE_GLYPHS = ("├", "└", "─", "│")

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class LayoutNode:
    """
    Represents a single file or directory of a proposed project layout.

    Attributes:
        id: Session-unique identifier, assigned in order of appearance.
        name: Display name without the directory suffix.
        is_dir: True when the source token carried the directory suffix.
        depth: Nesting level inferred from indentation at parse time.
        children: Ordered child nodes (creation and render order).
        parent: Non-owning back-reference to the enclosing directory.
    """
    id: int
    name: str
    is_dir: bool
    depth: int = 0
    children: List["LayoutNode"] = field(default_factory=list)
    parent: Optional["LayoutNode"] = field(default=None, repr=False)

    def add_child(self, child: "LayoutNode") -> None:
        """Append a child and point its back-reference at this node."""
        self.children.append(child)
        child.parent = self

    @property
    def display_name(self) -> str:
        return self.name + DIR_SUFFIX if self.is_dir else self.name


# -----------------------------------------------------------------------------
# TRAVERSAL HELPERS
# -----------------------------------------------------------------------------

def iter_nodes(root: Optional[LayoutNode]) -> Iterator[LayoutNode]:
    """Yield every node of the tree in pre-order. An empty tree yields nothing."""
    if root is None:
        return
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def count_nodes(root: Optional[LayoutNode]) -> int:
    return sum(1 for _ in iter_nodes(root))


def find_node(root: Optional[LayoutNode], node_id: int) -> Optional[LayoutNode]:
    """Locate a node by identifier, or None when it is not in the tree."""
    for node in iter_nodes(root):
        if node.id == node_id:
            return node
    return None


def is_last_child(node: LayoutNode) -> bool:
    """True for the root and for the final entry of its parent's children."""
    if node.parent is None:
        return True
    siblings = node.parent.children
    return bool(siblings) and siblings[-1] is node


def looks_like_bare_item(token: str) -> bool:
    """
    True for a single token that reads like a tree item on its own.

    The token must hold no whitespace and either end with the directory
    suffix or carry a file extension (text after its last dot). Ellipses and
    abbreviations such as '...' or 'etc.' are rejected.
    """
    if not token or any(ch.isspace() for ch in token):
        return False
    if token.endswith(DIR_SUFFIX):
        return _has_alnum(token[:-len(DIR_SUFFIX)])
    _, dot, extension = token.rpartition(".")
    return bool(dot) and _has_alnum(extension)


def _has_alnum(text: str) -> bool:
    return any(ch.isalnum() for ch in text)
