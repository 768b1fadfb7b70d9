from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: configuration resolution (defaults, saved
preferences, command-line overrides, environment credentials), logging
bootstrap, the interactive review session, and the final filesystem walk.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from scaffold4ai.core.services.materializer import materialize_tree
from scaffold4ai.domain.config import (
    ConfigurationError,
    get_config_path,
    get_default_config,
    load_config,
    resolve_settings,
    save_config,
    validate_config,
)
from scaffold4ai.infra.fs import normalize_path, safe_mkdir
from scaffold4ai.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from scaffold4ai.infra.network import request_project_layout
from scaffold4ai.interface.cli import args as cli_args
from scaffold4ai.interface.cli.console import read_user_input, styled, write_line
from scaffold4ai.interface.cli.session import LayoutSession, LayoutSource
from scaffold4ai.utils.ansi import Colors
from scaffold4ai.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success or user abort, 1 failure,
             2 configuration/input error, 130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve configuration hierarchy
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf)

    # 3. Logging bootstrap
    log_file = get_default_log_path() if conf["save_log"] else None
    configure_logging(LoggingConfig(
        level="DEBUG" if conf["debug"] else "WARNING",
        console=True,
        log_file=log_file,
    ))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    color = bool(conf["color"])

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return 0

    if args.save_config:
        if save_config(conf):
            write_line(i18n.t("cli.status.config_saved", path=get_config_path()))

    # 4. Layout source selection
    prompt = (args.prompt or "").strip()
    if args.layout_file:
        source = _file_source(args.layout_file)
        if source is None:
            return 2
    else:
        if not prompt:
            write_line(i18n.t("cli.prompt.missing"))
            try:
                prompt = read_user_input(i18n.t("cli.prompt.ask"))
            except EOFError:
                prompt = ""
            if not prompt:
                write_line(i18n.t("cli.prompt.empty_exit"))
                return 0
        try:
            settings = resolve_settings(conf)
        except ConfigurationError as e:
            logger.error(str(e))
            print(i18n.t("cli.errors.config", error=e), file=sys.stderr)
            return 2
        source = lambda description: request_project_layout(description, settings)

    # 5. Review session
    session = LayoutSession(
        source,
        color=color,
        auto_confirm=args.auto_confirm,
        show_raw=bool(conf["debug"]),
    )
    try:
        outcome = session.run(prompt)
    except (KeyboardInterrupt, EOFError):
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return 130

    if outcome.aborted:
        return 0
    if outcome.root is None:
        write_line(styled(i18n.t("cli.status.nothing"), Colors.BOLD_YELLOW, color))
        return 0

    # 6. Materialization phase
    base_path = ""
    if conf["output_dir"]:
        base_path = normalize_path(conf["output_dir"], fallback=".")
        ok, err = safe_mkdir(base_path)
        if not ok:
            msg = i18n.t("cli.errors.output_dir", path=base_path, error=err)
            logger.error(msg)
            print(styled(msg, Colors.BOLD_RED, color), file=sys.stderr)
            return 1
        write_line(styled("\n" + i18n.t("cli.status.output_dir", path=base_path), Colors.BOLD_CYAN, color))

    write_line(styled("\n" + i18n.t("cli.status.creating"), Colors.BOLD_GREEN, color))

    def report(kind: str, path: str) -> None:
        if kind == "dir":
            write_line(styled(i18n.t("cli.status.created_dir", path=path), Colors.BOLD_BLUE, color))
        elif kind == "file":
            write_line(styled(i18n.t("cli.status.created_file", path=path), Colors.BOLD_GREEN, color))
        else:
            write_line(styled(i18n.t("cli.status.create_failed", path=path), Colors.BOLD_RED, color))

    result = materialize_tree(outcome.root, base_path, on_item=report)

    if result.ok:
        write_line(styled(i18n.t("cli.status.success"), Colors.BOLD_GREEN, color))
        return 0

    write_line(styled(i18n.t("cli.status.partial", count=len(result.errors)), Colors.BOLD_YELLOW, color))
    return 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of override values into the base configuration.

    Only known keys with a non-None value are taken from overrides.
    """
    out = dict(base)
    keys_to_merge = ["output_dir", "model", "api_url", "color", "debug"]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# LAYOUT SOURCES
# -----------------------------------------------------------------------------

def _file_source(path: str) -> Optional[LayoutSource]:
    """Read a tree drawing from disk and serve it for every request."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        msg = i18n.t("cli.errors.layout_file", path=path, error=e)
        logger.error(msg)
        print(msg, file=sys.stderr)
        return None

    logger.debug(f"Serving layout from file: {path} ({len(text)} chars)")
    return lambda _description: text

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
