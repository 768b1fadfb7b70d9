from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared tree drawings and parsed layouts used across unit tests.
"""

import os
import sys

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from scaffold4ai.core.layout.parser import parse_layout  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def simple_layout_text() -> str:
    """
    Minimal two-level drawing.

    Structure:
    app/
      src/
        main.ext
      README.md
    """
    return (
        "app/\n"
        "├── src/\n"
        "│   └── main.ext\n"
        "└── README.md"
    )


@pytest.fixture
def nested_layout_text() -> str:
    """Drawing with three directory levels and mixed siblings."""
    return (
        "my-project/\n"
        "├── src/\n"
        "│   ├── main.go\n"
        "│   └── utils/\n"
        "│       └── helpers.go\n"
        "├── tests/\n"
        "│   └── main_test.go\n"
        "├── .gitignore\n"
        "└── README.md"
    )


@pytest.fixture
def simple_tree(simple_layout_text):
    return parse_layout(simple_layout_text)


@pytest.fixture
def nested_tree(nested_layout_text):
    return parse_layout(nested_layout_text)
