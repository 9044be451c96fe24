"""
Command line entry point for running accessibility checks on element dumps.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from rich.markup import escape

from .config.check_config import get_check_config, load_check_config
from .errors import A11yCheckError
from .services.runner import evaluate
from .services.snapshot import SnapshotIdentity, SnapshotSession, SnapshotStore
from .utils.logging import setup_logging
from .utils.ui import THEME, console, print_violations

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURES = 1
EXIT_ERROR = 2


def load_elements(path: str) -> List[Any]:
    """
    Read raw elements from a JSON dump.

    Accepts either a list of element objects or an object with an
    "elements" list.

    Raises:
        A11yCheckError: If the file cannot be read or has the wrong shape
    """
    dump_path = Path(path)
    try:
        with open(dump_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise A11yCheckError(f"Cannot read element dump {dump_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise A11yCheckError(f"Element dump {dump_path} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise A11yCheckError(f"Malformed element dump {dump_path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("elements")
    if not isinstance(data, list):
        raise A11yCheckError(
            f"Element dump {dump_path} must be a list or contain an 'elements' list"
        )
    return data


def run_check(args) -> int:
    config = load_check_config(args.config) if args.config else get_check_config()
    elements = load_elements(args.elements)

    violations = evaluate(args.rules or ["all"], elements, config=config)
    print_violations(violations, item_label=config.item_label)

    return EXIT_FAILURES if any(v.is_failure for v in violations) else EXIT_OK


def run_snapshot(args) -> int:
    config = load_check_config(args.config) if args.config else get_check_config()
    elements = load_elements(args.elements)

    store = SnapshotStore(
        args.reference_dir,
        output_dir=args.output_dir,
        create_dirs=args.create_dirs,
    )
    session = SnapshotSession(store, config)
    identity = SnapshotIdentity(suite_name=args.suite, test_name=args.test)

    violations = session.snapshot(elements, identity)
    print_violations(violations, item_label=config.item_label)

    return EXIT_FAILURES if any(v.is_failure for v in violations) else EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="a11y-checks",
        description="Accessibility checks for UI element trees",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output with detailed logs",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Run accessibility rules")
    check.add_argument("elements", help="JSON file with the screen's elements")
    check.add_argument(
        "--rules",
        nargs="+",
        metavar="NAME",
        help="Rule or preset names (all, images, interactive, labels); default: all",
    )
    check.add_argument("--config", help="YAML file with threshold overrides")
    check.set_defaults(handler=run_check)

    snap = subparsers.add_parser("snapshot", help="Compare against a reference snapshot")
    snap.add_argument("elements", help="JSON file with the screen's elements")
    snap.add_argument("--suite", required=True, help="Suite name")
    snap.add_argument("--test", required=True, help="Test name")
    snap.add_argument("--reference-dir", required=True, help="Reference snapshot directory")
    snap.add_argument(
        "--output-dir", help="Where generated snapshots go (default: reference dir)"
    )
    snap.add_argument(
        "--create-dirs",
        action="store_true",
        help="Create the output directory if it does not exist",
    )
    snap.add_argument("--config", help="YAML file with threshold overrides")
    snap.set_defaults(handler=run_snapshot)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments and run the requested command.

    Returns:
        0 when no failures were found, 1 on failures, 2 on usage or input errors
    """
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)

    try:
        return args.handler(args)
    except A11yCheckError as e:
        logger.debug("Command failed", exc_info=True)
        console.print(f"  [{THEME['error']}]Error: {escape(str(e))}[/]")
        return EXIT_ERROR


def cli():
    """CLI entry point with argument parsing."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
