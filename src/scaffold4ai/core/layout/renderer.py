from __future__ import annotations

"""
Layout Tree Renderer.

Turns a LayoutNode tree into identifier-prefixed ASCII lines for review
between edits. Read-only: the tree is never modified.
"""

from typing import List, Optional

from scaffold4ai.domain.layout_models import (
    BRANCH_CONNECTOR,
    INDENT_BLANK,
    INDENT_CONTINUATION,
    LAST_CONNECTOR,
    LayoutNode,
)
from scaffold4ai.utils.ansi import Colors, colorize

EMPTY_NOTICE = "(Structure is empty)"
ID_COLUMN_WIDTH = 5

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_layout_tree(
        root: Optional[LayoutNode],
        lines: Optional[List[str]] = None,
        *,
        color: bool = False,
) -> List[str]:
    """
    Render the tree in pre-order, one line per node.

    Each line starts with the bracketed node id padded to a fixed column,
    followed by the ancestry prefix, the connector ('├── ' or '└── ') and the
    name. Directories carry a trailing '/'. The root is printed without a
    connector.

    Args:
        root: Tree to render, or None.
        lines: Optional accumulator to append to.
        color: Emit ANSI colors for ids and directory names.

    Returns:
        List[str]: The accumulator holding the rendered lines.
    """
    if lines is None:
        lines = []

    if root is None:
        lines.append(colorize(EMPTY_NOTICE, Colors.BOLD_YELLOW, color))
        return lines

    _render_node(root, lines, prefix="", is_last=True, color=color)
    return lines

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _render_node(
        node: LayoutNode,
        lines: List[str],
        prefix: str,
        is_last: bool,
        color: bool,
) -> None:
    id_tag = colorize(f"[{node.id}]".ljust(ID_COLUMN_WIDTH), Colors.MAGENTA, color)

    connector = ""
    child_prefix = prefix
    if node.parent is not None:
        connector = LAST_CONNECTOR if is_last else BRANCH_CONNECTOR
        child_prefix = prefix + (INDENT_BLANK if is_last else INDENT_CONTINUATION)

    label = node.display_name
    if node.is_dir:
        label = colorize(label, Colors.BOLD_BLUE, color)

    lines.append(f"{id_tag}{prefix}{connector}{label}")

    total = len(node.children)
    for i, child in enumerate(node.children):
        _render_node(child, lines, child_prefix, i == total - 1, color)
