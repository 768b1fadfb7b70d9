from __future__ import annotations

"""
Materialization Result Models.

Data transfer objects describing what a filesystem walk created and which
items failed along the way.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class MaterializeError:
    """
    A single item that could not be created.

    Attributes:
        path: Target path of the failed item.
        error: Operating system error message.
    """
    path: str
    error: str


@dataclass(frozen=True)
class MaterializeResult:
    """
    Outcome of turning a layout tree into directories and files.

    Attributes:
        base_path: Directory the tree was created under ("" for cwd).
        created_dirs: Directory paths created (or already present), in walk order.
        created_files: File paths created, in walk order.
        errors: Items that failed; the walk continues past them.
    """
    base_path: str
    created_dirs: List[str] = field(default_factory=list)
    created_files: List[str] = field(default_factory=list)
    errors: List[MaterializeError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
