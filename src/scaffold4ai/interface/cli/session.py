from __future__ import annotations

"""
Interactive Layout Session.

Drives one review cycle: request a layout for the description, clean and
parse it, then let the user delete items, re-prompt, abort, or confirm
creation. Parse failures and empty replies never end the process; the user
is offered a retry with a different description instead.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from scaffold4ai.core.layout.mutator import delete_node
from scaffold4ai.core.layout.normalizer import first_n_lines, select_layout_text
from scaffold4ai.core.layout.parser import parse_layout
from scaffold4ai.core.layout.renderer import render_layout_tree
from scaffold4ai.domain.errors import LayoutParseError
from scaffold4ai.domain.layout_models import LayoutNode
from scaffold4ai.interface.cli.console import (
    InputFn,
    OutputFn,
    ask_yes_no,
    read_user_input,
    styled,
    write_line,
)
from scaffold4ai.utils.ansi import Colors
from scaffold4ai.utils.i18n import i18n

logger = logging.getLogger(__name__)

LayoutSource = Callable[[str], str]

# Edit loop verdicts
_CREATE = "create"
_REPROMPT = "reprompt"
_ABORT = "abort"


@dataclass(frozen=True)
class SessionOutcome:
    """
    Final state of an interactive session.

    Attributes:
        root: Tree confirmed for creation (None when aborted or emptied).
        aborted: True when the user gave up before confirming.
        reason: Message explaining an abort.
    """
    root: Optional[LayoutNode]
    aborted: bool
    reason: str = ""


class LayoutSession:
    """
    Request/parse/review loop around a layout source.

    Args:
        source: Callable mapping a description to raw tree text ("" on failure).
        read: Line input function.
        write: Line output function.
        color: Emit ANSI colors.
        auto_confirm: Skip the review loop and confirm the first parsed tree.
        show_raw: Echo the raw reply before parsing.
    """

    def __init__(
            self,
            source: LayoutSource,
            *,
            read: InputFn = read_user_input,
            write: OutputFn = write_line,
            color: bool = True,
            auto_confirm: bool = False,
            show_raw: bool = False,
    ) -> None:
        self._source = source
        self._read = read
        self._write = write
        self._color = color
        self._auto_confirm = auto_confirm
        self._show_raw = show_raw

    # -------------------------------------------------------------------------
    # MAIN LOOP
    # -------------------------------------------------------------------------

    def run(self, prompt: str) -> SessionOutcome:
        """
        Run the session until the user confirms creation or aborts.

        Args:
            prompt: Initial project description.

        Returns:
            SessionOutcome: The confirmed tree or the abort reason.
        """
        while True:
            raw = self._source(prompt)
            if not raw:
                self._write(i18n.t("cli.session.no_layout"))
                prompt, reason = self._ask_new_prompt("cli.session.aborted")
                if not prompt:
                    return self._abort(reason)
                continue

            if self._show_raw:
                self._write(self._style("\n" + i18n.t("cli.session.raw_header"), Colors.BOLD_MAGENTA))
                self._write(raw)
                self._write(self._style(i18n.t("cli.session.raw_footer"), Colors.BOLD_MAGENTA))

            layout_text = select_layout_text(raw)
            try:
                root: Optional[LayoutNode] = parse_layout(layout_text)
            except LayoutParseError as e:
                logger.debug(f"Layout rejected: {e}")
                self._write(self._style(i18n.t("cli.session.parse_error", error=e), Colors.BOLD_RED))
                self._write(i18n.t("cli.session.snippet"))
                self._write(first_n_lines(layout_text, 5))
                prompt, reason = self._ask_new_prompt("cli.session.aborted_parse")
                if not prompt:
                    return self._abort(reason)
                continue

            verdict, root, new_prompt = self._review(root)
            if verdict == _ABORT:
                return self._abort(i18n.t("cli.session.aborted"))
            if verdict == _REPROMPT:
                prompt = new_prompt
                continue
            return SessionOutcome(root=root, aborted=False)

    # -------------------------------------------------------------------------
    # REVIEW LOOP
    # -------------------------------------------------------------------------

    def _review(self, root: Optional[LayoutNode]) -> Tuple[str, Optional[LayoutNode], str]:
        """
        Show the tree and apply user actions until a verdict is reached.

        Returns:
            Tuple[str, Optional[LayoutNode], str]: (verdict, current root, new prompt).
        """
        while True:
            self._write(self._style("\n" + i18n.t("cli.session.current"), Colors.BOLD_CYAN))
            for line in render_layout_tree(root, color=self._color):
                self._write(line)

            if self._auto_confirm and root is not None:
                return _CREATE, root, ""

            key = "cli.session.actions_empty" if root is None else "cli.session.actions"
            answer = self._read(self._style("\n" + i18n.t(key), Colors.BOLD_YELLOW))
            parts = answer.strip().lower().split()

            if not parts:
                if root is not None:
                    return _CREATE, root, ""
                continue

            action = parts[0]
            if action in ("c", "create"):
                if root is None:
                    self._error(i18n.t("cli.session.cannot_create"))
                    continue
                return _CREATE, root, ""

            if action in ("d", "delete"):
                root = self._delete(root, parts[1:])
                continue

            if action in ("r", "re-prompt"):
                new_prompt = self._read(i18n.t("cli.session.reprompt")).strip()
                if not new_prompt:
                    self._write(i18n.t("cli.session.keep_current"))
                    continue
                return _REPROMPT, root, new_prompt

            if action in ("a", "abort"):
                return _ABORT, root, ""

            self._error(i18n.t("cli.session.invalid_action"))

    def _delete(self, root: Optional[LayoutNode], args: List[str]) -> Optional[LayoutNode]:
        if root is None:
            self._error(i18n.t("cli.session.already_empty"))
            return root
        if not args:
            self._error(i18n.t("cli.session.delete_usage"))
            return root
        try:
            node_id = int(args[0])
        except ValueError:
            self._error(i18n.t("cli.session.invalid_id"))
            return root

        root, found = delete_node(root, node_id)
        if found:
            self._write(self._style(i18n.t("cli.session.deleted", id=node_id), Colors.BOLD_GREEN))
        else:
            self._error(i18n.t("cli.session.not_found", id=node_id))
        return root

    # -------------------------------------------------------------------------
    # HELPERS
    # -------------------------------------------------------------------------

    def _ask_new_prompt(self, abort_key: str) -> Tuple[str, str]:
        """Offer a retry. Returns (new prompt, "") or ("", abort reason)."""
        if not ask_yes_no(self._read, i18n.t("cli.session.retry")):
            return "", i18n.t(abort_key)
        new_prompt = self._read(i18n.t("cli.session.new_prompt")).strip()
        if not new_prompt:
            return "", i18n.t("cli.session.no_prompt")
        return new_prompt, ""

    def _abort(self, reason: str) -> SessionOutcome:
        self._error(reason)
        logger.info(f"Session aborted: {reason}")
        return SessionOutcome(root=None, aborted=True, reason=reason)

    def _error(self, message: str) -> None:
        self._write(self._style(message, Colors.BOLD_RED))

    def _style(self, text: str, color: str) -> str:
        return styled(text, color, self._color)
