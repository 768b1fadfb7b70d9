from __future__ import annotations

"""
Layout Tree Parser.

Rebuilds a strictly rooted LayoutNode tree from an ASCII tree drawing in a
single forward pass. Depth is inferred from the indentation run in front of
each connector; an ancestor stack of open directories, popped by depth, gives
every new node its parent.

Tolerated anomalies:
- Blank lines and lines without an extractable item name are skipped.
- Connector-less lines after the root are skipped as stray commentary,
  unless they are an unindented bare item token (see _is_second_top_level).
- A first item with a nonzero inferred depth is coerced to depth 0.
- Depth jumps attach to the nearest open ancestor.

Rejected (raised, never repaired):
- No root at all (EmptyLayoutError).
- A node with no open ancestor of smaller depth, such as a second top-level
  item (OrphanedNodeError).
"""

import logging
from typing import List, Optional, Tuple

from scaffold4ai.domain.errors import EmptyLayoutError, OrphanedNodeError
from scaffold4ai.domain.layout_models import (
    BRANCH_CONNECTOR,
    DIR_SUFFIX,
    INDENT_WIDTH,
    LAST_CONNECTOR,
    VERTICAL_BAR,
    LayoutNode,
    looks_like_bare_item,
)

logger = logging.getLogger(__name__)

CONNECTORS = (BRANCH_CONNECTOR, LAST_CONNECTOR)

# -----------------------------------------------------------------------------
# IDENTIFIER ALLOCATION
# -----------------------------------------------------------------------------

class _IdAllocator:
    """Sequential identifier source scoped to a single parse call."""

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def next_id(self) -> int:
        value = self._next
        self._next += 1
        return value

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_layout(text: str) -> LayoutNode:
    """
    Convert normalized tree text into a rooted LayoutNode tree.

    Identifiers restart at 1 on every call and follow the order in which
    items appear in the text.

    Args:
        text: Tree drawing, one item per line.

    Returns:
        LayoutNode: The root of the parsed tree.

    Raises:
        EmptyLayoutError: If no root item can be established.
        OrphanedNodeError: If a line cannot be attached to any open ancestor.
    """
    if not text or not text.strip():
        raise EmptyLayoutError("layout is empty")

    ids = _IdAllocator()
    root: Optional[LayoutNode] = None
    stack: List[LayoutNode] = []

    logger.debug("--- Parsing layout to node tree ---")

    for line_number, line in enumerate(text.split("\n"), start=1):
        original = line[:-1] if line.endswith("\r") else line
        if not original.strip():
            logger.debug(f"L{line_number}: skipping empty line")
            continue

        item, depth, has_connector = _split_line(original)

        if not has_connector:
            if root is not None and not _is_second_top_level(original):
                logger.debug(
                    f"L{line_number}: skipping line without tree prefix "
                    f"(root already set): {original!r}"
                )
                continue
            item, depth = original.strip(), 0

        if not item:
            logger.debug(f"L{line_number}: could not extract item name from {original!r}")
            continue

        is_dir = item.endswith(DIR_SUFFIX)
        node = LayoutNode(
            id=ids.next_id(),
            name=item[:-len(DIR_SUFFIX)] if is_dir else item,
            is_dir=is_dir,
            depth=depth,
        )
        logger.debug(
            f"L{line_number}: name={node.name!r} depth={node.depth} "
            f"is_dir={node.is_dir} id={node.id}"
        )

        if root is None:
            if node.depth != 0:
                logger.debug(
                    f"L{line_number}: first item {node.name!r} has depth "
                    f"{node.depth}, adjusting to 0"
                )
                node.depth = 0
            root = node
            stack.append(root)
            continue

        while stack and stack[-1].depth >= node.depth:
            stack.pop()

        if not stack:
            logger.debug(
                f"L{line_number}: orphaned node or multiple roots with {node.name!r} "
                f"(current root {root.name!r})"
            )
            raise OrphanedNodeError(line_number, node.name, node.depth)

        stack[-1].add_child(node)
        if node.is_dir:
            stack.append(node)

    logger.debug("--- Finished parsing layout ---")

    if root is None:
        raise EmptyLayoutError()
    return root

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _split_line(line: str) -> Tuple[str, int, bool]:
    """
    Locate a connector and derive the item token and its depth.

    Returns:
        Tuple[str, int, bool]: (item token, inferred depth, connector found).
    """
    for connector in CONNECTORS:
        idx = line.find(connector)
        if idx == -1:
            continue
        item = line[idx + len(connector):].strip()
        indent = line[:idx]
        level_chars = sum(1 for ch in indent if ch == VERTICAL_BAR or ch == " ")
        depth = level_chars // INDENT_WIDTH
        if item:
            depth += 1
        return item, depth, True
    return "", 0, False


def _is_second_top_level(line: str) -> bool:
    """
    A connector-less line flush with the left margin holding a single item
    token (e.g. 'other-project/'). Once a root exists this can only be a
    second top-level item, which has no valid parent.
    """
    if line[:1].isspace():
        return False
    return looks_like_bare_item(line.strip())
