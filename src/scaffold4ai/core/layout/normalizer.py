from __future__ import annotations

"""
Layout Text Normalizer.

Strips the conversational noise a text generator tends to wrap around a tree
drawing (greetings, notes, markdown fences) and keeps only the lines that look
like part of the structure. The heuristics are advisory: select_layout_text()
falls back to the raw reply whenever cleaning leaves too little to parse.
"""

import logging
from typing import List

from scaffold4ai.domain.layout_models import TREE_GLYPHS, looks_like_bare_item

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# NOISE PATTERNS
# -----------------------------------------------------------------------------

BOILERPLATE_PREFIXES = (
    "here is",
    "here's",
    "sure, here",
    "certainly, here",
    "the following is",
    "note:",
    "note ",
    "```",
)

META_COMMENTARY = (
    "suggested structure",
    "you can adjust this",
    "this is just an example",
)

MIN_STRUCTURE_LINES = 2

# Characters that disqualify the first line of a fenced reply as a language tag
_FENCE_TAG_BLOCKERS = "├─└│/"
_FENCE_TAG_MAX_LEN = 15

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def clean_layout_text(content: str) -> str:
    """
    Reduce a free-text reply to the lines that belong to the tree drawing.

    A line is kept when it contains a tree glyph, when it is the first
    accepted line and looks like a bare root item, or when a structural line
    was already accepted and the line is not blank.

    Args:
        content: Raw reply text, possibly empty.

    Returns:
        str: The retained lines joined by newlines.
    """
    cleaned: List[str] = []
    in_structure = False

    for line in (content or "").split("\n"):
        trimmed = line.strip()
        lowered = trimmed.lower()

        if lowered.startswith(BOILERPLATE_PREFIXES):
            continue
        if any(marker in lowered for marker in META_COMMENTARY):
            continue

        original = line[:-1] if line.endswith("\r") else line

        has_glyph = any(glyph in original for glyph in TREE_GLYPHS)
        if has_glyph or (trimmed and (in_structure or looks_like_bare_item(trimmed))):
            cleaned.append(original)
            in_structure = True

    return "\n".join(cleaned)


def select_layout_text(raw: str) -> str:
    """
    Clean a reply, reverting to the raw text if cleaning destroyed it.

    Args:
        raw: Raw reply text.

    Returns:
        str: Cleaned text, or raw unchanged when fewer than two non-blank
             lines survive cleaning.
    """
    cleaned = clean_layout_text(raw)
    kept = [ln for ln in cleaned.split("\n") if ln.strip()]
    if len(kept) < MIN_STRUCTURE_LINES and raw:
        logger.debug("Cleaned structure was very short, using raw output as fallback.")
        return raw
    return cleaned


def strip_code_fences(content: str) -> str:
    """
    Remove a markdown fence wrapping the whole reply.

    A short first line inside the fence (e.g. 'text' or 'bash') is treated as
    the language tag and dropped, unless it carries tree glyphs, a slash or a
    dot and therefore looks like the root of the drawing.
    """
    content = (content or "").strip()
    if content.startswith("```") and content.endswith("```"):
        content = content[3:]
        if content.endswith("```"):
            content = content[:-3]
        newline = content.find("\n")
        if newline != -1:
            first_line = content[:newline].strip()
            if (
                    0 < len(first_line) < _FENCE_TAG_MAX_LEN
                    and not any(ch in first_line for ch in _FENCE_TAG_BLOCKERS)
                    and "." not in first_line
            ):
                content = content[newline + 1:]
    return content.strip()


def first_n_lines(text: str, n: int = 5) -> str:
    """Return the first n lines of text, marking a cut with '...'."""
    lines = text.split("\n")
    if len(lines) > n:
        return "\n".join(lines[:n]) + "\n..."
    return text
