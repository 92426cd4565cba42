"""CLI entrypoint for fdc."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .deleter import delete_files
from .finder import DeadCodeFinder
from .logging import configure_logging, get_logger
from .references import ReferenceScanError
from .reporter import ConsoleReporter


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fdc",
        description="Find Dead Code - Identifies unused files in WordPress plugin projects",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Project directory to scan (default: current directory); a single file is rejected",
    )
    parser.add_argument(
        "-d",
        "--delete",
        action="store_true",
        help="Delete found dead files",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose output",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Emit diagnostic logs on stderr.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with exclude_paths, root_marker or encoding settings.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write diagnostic logs to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for fdc."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(debug=bool(args.debug), log_file=args.log_file)
    logger = get_logger("cli")

    root_path = Path(args.path) if args.path else Path.cwd()
    if not root_path.exists():
        parser.exit(1, f"Error: Path '{root_path}' does not exist\n")

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        parser.exit(1, f"Error: {exc}\n")

    reporter = ConsoleReporter(verbose=bool(args.verbose))
    reporter.banner(root_path.resolve(), shown=str(root_path))

    finder = DeadCodeFinder(config)
    try:
        result = finder.run(root_path, on_discover=reporter.discovered)
    except ReferenceScanError as exc:
        parser.exit(1, f"Error: {exc}\n")
    except OSError as exc:
        parser.exit(1, f"Error: {exc}\n")

    reporter.discovered_count(len(result.catalog))
    reporter.results(result)

    if args.delete and result.dead:
        reporter.delete_warning()
        try:
            sys.stdin.readline()
        except KeyboardInterrupt:
            parser.exit(130, "\nCancelled, no files were deleted.\n")

        try:
            removed = delete_files(result.dead, on_delete=reporter.deleting)
        except OSError as exc:
            logger.error("Deletion aborted: %s", exc)
            parser.exit(1, f"Error: failed to delete {exc.filename}: {exc.strerror or exc}\n")
        reporter.deleted(len(removed), len(result.comment_only_dead))


if __name__ == "__main__":
    main(sys.argv[1:])
