from __future__ import annotations

"""
ANSI Terminal Styling.

Escape sequences used to highlight console output, plus a helper that leaves
text untouched when color is disabled.
"""


class Colors:
    MAGENTA = "\033[35m"
    BOLD_BLUE = "\033[1;34m"
    BOLD_CYAN = "\033[1;36m"
    BOLD_GREEN = "\033[1;32m"
    BOLD_YELLOW = "\033[1;33m"
    BOLD_RED = "\033[1;31m"
    BOLD_MAGENTA = "\033[1;35m"
    RESET = "\033[0m"


def colorize(msg: str, color: str, enabled: bool = True) -> str:
    if not enabled:
        return msg
    return f"{color}{msg}{Colors.RESET}"
