from __future__ import annotations

"""
Layout Materializer.

Walks a validated LayoutNode tree depth-first and creates a directory for
every directory node and an empty file for every file node, in stored child
order. A failing item is logged and recorded; its siblings are still created.
"""

import logging
import os
from typing import Callable, List, Optional

from scaffold4ai.domain.layout_models import LayoutNode
from scaffold4ai.domain.materialize_models import MaterializeError, MaterializeResult
from scaffold4ai.infra.fs import safe_mkdir, safe_touch

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, str], None]

UNSAFE_NAME_ERROR = "absolute or parent-relative names are not created"


def materialize_tree(
        root: Optional[LayoutNode],
        base_path: str = "",
        on_item: Optional[ProgressCallback] = None,
) -> MaterializeResult:
    """
    Create the directories and files described by the tree.

    Args:
        root: Tree to create. None creates nothing.
        base_path: Directory under which the root is created ("" = cwd).
        on_item: Optional callback receiving ("dir" | "file" | "error", path).

    Returns:
        MaterializeResult: Created paths and per-item failures.
    """
    result = MaterializeResult(base_path=base_path)
    if root is None:
        logger.info("No project structure to create.")
        return result

    _create_node(root, base_path, result, on_item)
    logger.info(
        f"Materialized {len(result.created_dirs)} directories and "
        f"{len(result.created_files)} files ({len(result.errors)} errors)."
    )
    return result

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _create_node(
        node: LayoutNode,
        base_path: str,
        result: MaterializeResult,
        on_item: Optional[ProgressCallback],
) -> None:
    if _escapes_base(node.name):
        _record_error(node.name, UNSAFE_NAME_ERROR, result.errors, on_item)
        return

    item_path = os.path.join(base_path, node.name) if base_path else node.name

    if node.is_dir:
        ok, err = safe_mkdir(item_path)
        if not ok:
            _record_error(item_path, err, result.errors, on_item)
            return
        result.created_dirs.append(item_path)
        logger.debug(f"Created directory: {item_path}")
        _notify(on_item, "dir", item_path)
        for child in node.children:
            _create_node(child, item_path, result, on_item)
        return

    parent_dir = os.path.dirname(item_path)
    if parent_dir and parent_dir != ".":
        ok, err = safe_mkdir(parent_dir)
        if not ok:
            _record_error(item_path, err, result.errors, on_item)
            return

    ok, err = safe_touch(item_path)
    if not ok:
        _record_error(item_path, err, result.errors, on_item)
        return
    result.created_files.append(item_path)
    logger.debug(f"Created file: {item_path}")
    _notify(on_item, "file", item_path)


def _escapes_base(name: str) -> bool:
    """True for names that would resolve outside the directory being filled."""
    if os.path.isabs(name) or name.startswith(("/", "\\")) or os.path.splitdrive(name)[0]:
        return True
    parts = name.replace("\\", "/").split("/")
    return ".." in parts


def _record_error(
        path: str,
        error: Optional[str],
        errors: List[MaterializeError],
        on_item: Optional[ProgressCallback],
) -> None:
    logger.error(f"Error creating {path}: {error}")
    errors.append(MaterializeError(path=path, error=error or "unknown error"))
    _notify(on_item, "error", path)


def _notify(on_item: Optional[ProgressCallback], kind: str, path: str) -> None:
    if on_item is not None:
        on_item(kind, path)
