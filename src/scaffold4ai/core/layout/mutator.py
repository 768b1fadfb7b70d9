from __future__ import annotations

"""
Layout Tree Mutator.

Identifier-addressed subtree deletion. Removing a node drops its whole
subtree with it; identifiers of the remaining nodes are never reassigned.
"""

import logging
from typing import Optional, Tuple

from scaffold4ai.domain.layout_models import LayoutNode

logger = logging.getLogger(__name__)


def delete_node(root: Optional[LayoutNode], node_id: int) -> Tuple[Optional[LayoutNode], bool]:
    """
    Delete the node with the given identifier together with its descendants.

    Deleting the root empties the whole structure. Callers must always keep
    the returned root.

    Args:
        root: Current tree root, or None for an empty structure.
        node_id: Identifier of the node to remove.

    Returns:
        Tuple[Optional[LayoutNode], bool]: (new root, whether the id was found).
    """
    if root is None:
        return None, False
    if root.id == node_id:
        logger.debug(f"Deleting root {root.name!r}; structure is now empty.")
        return None, True

    found = _delete_descendant(root, node_id)
    if not found:
        logger.debug(f"Delete requested for unknown id {node_id}.")
    return root, found


def _delete_descendant(parent: LayoutNode, node_id: int) -> bool:
    """Depth-first search for a direct child carrying node_id and unlink it."""
    for index, child in enumerate(parent.children):
        if child.id == node_id:
            del parent.children[index]
            child.parent = None
            logger.debug(f"Removed {child.name!r} (id {node_id}) from {parent.name!r}.")
            return True
        if _delete_descendant(child, node_id):
            return True
    return False
