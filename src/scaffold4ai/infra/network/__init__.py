from __future__ import annotations

"""
Network Communication Infrastructure.

Facade over the HTTP clients used by the application.
"""

from scaffold4ai.infra.network.llm_client import (
    build_layout_prompt,
    request_project_layout,
)

__all__ = [
    "build_layout_prompt",
    "request_project_layout",
]
