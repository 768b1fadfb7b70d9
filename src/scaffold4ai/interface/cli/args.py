from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the domain layer.
"""

import argparse
from typing import Any, Dict

from scaffold4ai.domain.constants import APP_VERSION
from scaffold4ai.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the Scaffold4AI CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="scaffold4ai",
        description=i18n.t("app.description"),
    )

    p.add_argument(
        "prompt",
        nargs="?",
        default=None,
        help=i18n.t("cli.args.prompt"),
    )

    # --- Output ---
    p.add_argument(
        "-o", "--output",
        dest="output_dir",
        default=None,
        help=i18n.t("cli.args.output"),
    )

    # --- Layout Source ---
    p.add_argument(
        "--layout-file",
        dest="layout_file",
        default=None,
        help=i18n.t("cli.args.layout_file"),
    )
    p.add_argument(
        "-y", "--yes",
        dest="auto_confirm",
        action="store_true",
        help=i18n.t("cli.args.yes"),
    )

    # --- Endpoint ---
    p.add_argument("--model", default=None, help=i18n.t("cli.args.model"))
    p.add_argument("--api-url", dest="api_url", default=None, help=i18n.t("cli.args.api_url"))

    # --- Console & Diagnostics ---
    p.add_argument("--no-color", action="store_true", help=i18n.t("cli.args.no_color"))
    p.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))

    # --- Configuration ---
    p.add_argument("--use-defaults", action="store_true", help=i18n.t("cli.args.defaults"))
    p.add_argument("--dump-config", action="store_true", help=i18n.t("cli.args.dump"))
    p.add_argument("--save-config", action="store_true", help=i18n.t("cli.args.save_config"))

    p.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Unset options map to None so the merge keeps the base value.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "output_dir": args.output_dir,
        "model": args.model,
        "api_url": args.api_url,
    }

    if args.no_color:
        overrides["color"] = False
    if args.debug:
        overrides["debug"] = True

    return overrides
