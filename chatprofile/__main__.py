"""
Main CLI entry point for the chat profile editor.
"""

import argparse
import sys
from pathlib import Path

from chatprofile.logging import configure_logging_from_args, get_logger


def build_parser() -> argparse.ArgumentParser:
    """
    Build the main argument parser with subcommands.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="chatprofile",
        description="Chat profile editor - edit names, instructions, and sampling settings",
        epilog="Use 'chatprofile <command> --help' for more information on a specific command.",
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to editor configuration file (.json, .yaml, or .yml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output (DEBUG level)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (overrides --verbose)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write logs to file",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands",
        required=False,
    )

    edit_parser = subparsers.add_parser(
        "edit",
        help="Open profiles in the interactive editor",
        description="Edit one or more profiles. With no files, a new profile is shown.",
    )
    edit_parser.add_argument(
        "profiles",
        nargs="*",
        type=Path,
        help="Profile files to open (ctrl+n / ctrl+p switch between them)",
    )
    access = edit_parser.add_mutually_exclusive_group()
    access.add_argument(
        "--read-only",
        action="store_true",
        help="Show profiles without editing",
    )
    access.add_argument(
        "--route",
        help="Route or query string, e.g. 'chatsettings?readOnly=true'",
    )

    show_parser = subparsers.add_parser(
        "show",
        help="Print a profile's effective settings",
    )
    show_parser.add_argument("profile", type=Path, help="Profile file to print")
    show_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the stored profile as JSON instead of a table",
    )

    return parser


def _load_config(path: Path | None):
    """Return the editor config, or an exit code when ``--config`` is unusable."""
    from chatprofile.config import default_config, load_config_from_file

    logger = get_logger(__name__)
    if path is None:
        return default_config()

    cfg_path = Path(path).expanduser().resolve()
    if not cfg_path.exists():
        logger.error("Config file not found: %s", cfg_path)
        print(f"Error: Configuration file not found: {cfg_path}")
        return 1
    logger.info("Loading configuration from: %s", cfg_path)
    try:
        return load_config_from_file(cfg_path)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1


def _run_show(args: argparse.Namespace, config) -> int:
    from chatprofile.profiles import load_profile_from_file
    from chatprofile.ui.shell import run_show

    return run_show(load_profile_from_file(args.profile), config, as_json=args.json)


def _run_edit(args: argparse.Namespace, config) -> int:
    from chatprofile.profiles import load_profile_from_file
    from chatprofile.ui.routes import read_only_from_query
    from chatprofile.ui.tui.app import run_tui

    read_only = bool(getattr(args, "read_only", False))
    route = getattr(args, "route", None)
    if route:
        read_only = read_only_from_query(route)
    profiles = [load_profile_from_file(path) for path in getattr(args, "profiles", None) or []]
    get_logger(__name__).info("Starting editor with %d profile(s), read_only=%s", len(profiles), read_only)
    return run_tui(config, profiles, read_only=read_only)


def main(argv: list[str] | None = None) -> int:
    """
    Run the chatprofile CLI.

    Args:
        argv: Command-line arguments (for testing)

    Returns:
        Exit code (0 for success, 1 for errors, 130 when interrupted)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging_from_args(
        verbose=args.verbose,
        log_level=args.log_level,
        log_file=str(args.log_file) if args.log_file else None,
    )

    logger = get_logger(__name__)
    logger.debug("Parsed arguments: %s", args)

    config = _load_config(args.config)
    if isinstance(config, int):
        return config

    try:
        if args.command == "show":
            return _run_show(args, config)
        return _run_edit(args, config)

    except KeyboardInterrupt:
        logger.info("Editor interrupted")
        print("\nInterrupted by user.")
        return 130

    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except Exception as e:
        logger.exception("Unhandled exception in main")
        print(f"\nError: {e}", file=sys.stderr)
        if args.verbose:
            raise
        return 1


if __name__ == "__main__":
    sys.exit(main())
