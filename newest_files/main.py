import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import config
from .core import SubtreeScanner
from .exceptions import UsageError
from .reporting import ReportGenerator
from .scanning.collector import larger_than, newer_than, older_than


def setup_logging(verbose: bool, log_file: Optional[Path] = None):
    """Sets up logging to stderr (stdout carries the report) and optionally a file."""
    log_level = logging.DEBUG if verbose else logging.INFO

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
        force=True,
    )


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=prog,
        description="List the files under a directory tree, newest first.",
    )

    p.add_argument("root", nargs="?", default=None, help="Root directory to scan (reported paths keep it as given)")

    order = p.add_mutually_exclusive_group()
    order.add_argument("--oldest-first", action="store_true", help="List oldest files first")
    order.add_argument("--largest-first", action="store_true", help="List largest files first")

    p.add_argument("--csv", type=Path, default=None, help="Also write the report to this CSV file")
    p.add_argument("--progress", action="store_true", help="Show a progress counter while scanning")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--log-file", type=Path, default=None, help="Also write log messages to this file")

    return p


def require_root(args: argparse.Namespace) -> str:
    if args.root is None:
        raise UsageError(config.USAGE_MESSAGE)
    return args.root


def main(argv: Optional[List[str]] = None):
    my_name = Path(sys.argv[0]).name
    print(f"invoked as '{my_name}'", file=sys.stderr)

    parser = build_parser(my_name)
    args = parser.parse_args(argv)

    # Checked before logging is set up so a usage error never creates --log-file
    try:
        root = require_root(args)
    except UsageError as e:
        print(e, file=sys.stderr)
        parser.print_usage(sys.stderr)
        sys.exit(1)

    setup_logging(args.verbose, args.log_file)

    if args.oldest_first:
        compare = older_than
    elif args.largest_first:
        compare = larger_than
    else:
        compare = newer_than

    try:
        scanner = SubtreeScanner(compare)
        records = scanner.scan(root, progress=args.progress)

        reporter = ReportGenerator()
        reporter.render(records)
        if args.csv:
            reporter.write_csv(records, args.csv)
    except KeyboardInterrupt:
        logging.warning("Scan cancelled by user.")
        sys.exit(1)
    except Exception:
        logging.exception("Fatal error while scanning.")
        sys.exit(1)


if __name__ == "__main__":
    main()
