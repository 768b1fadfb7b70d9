from __future__ import annotations

"""
Console Input/Output Primitives.

Line-based prompting and colored printing for the interactive CLI. The
session receives these as plain callables so tests can replace them.
"""

import sys
from typing import Callable

from scaffold4ai.utils.ansi import colorize

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def read_user_input(prompt_text: str) -> str:
    """Show a prompt and return the entered line trimmed (EOFError propagates)."""
    return input(prompt_text).strip()


def ask_yes_no(read: InputFn, prompt_text: str) -> bool:
    return read(prompt_text).strip().lower() == "y"


def write_line(text: str = "") -> None:
    print(text, file=sys.stdout)


def styled(text: str, color: str, enabled: bool) -> str:
    return colorize(text, color, enabled)
