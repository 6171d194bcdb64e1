"""
Timeout Checker - Compare a resource's declared timeouts with its docs.

Reads the Create/Read/Update/Delete timeouts from a Terraform provider
resource (or data source) definition, finds the matching documentation
page under ``website/docs``, and reports whether the two agree.

Files that are not resource or data source definitions are skipped, so
the checker can be run over every changed file in a commit. Arguments
after the repository root are ignored.

Usage:
    python -m timeout_checker internal/service/widget_resource.go .
    python -m timeout_checker internal/service/widget_data_source.go /src/provider -v
    timeout-checker internal/service/widget_resource.go . --no-color

Exit codes:
    0   documentation matches, or the file was skipped
    1   documentation does not match, or a file could not be read/found
"""

from __future__ import annotations

import argparse
import logging
import sys
from enum import Enum
from pathlib import Path

from rich.console import Console

from timeout_checker.config import (
    DEFAULT_DOCS_LABEL,
    DEFAULT_SOURCE_LABEL,
    HEADER_MESSAGE,
)
from timeout_checker.errors import (
    FileAccessError,
    NotFoundError,
    TraversalError,
    UnrecognizedFileKindError,
)
from timeout_checker.locator import find_file
from timeout_checker.naming import resolve_documentation_target
from timeout_checker.record_formats import get_parser
from timeout_checker.reporter import print_verdict, render_comparison

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class CheckOutcome(Enum):
    """Result of checking one source file."""

    SKIPPED = "skipped"
    MATCH = "match"
    MISMATCH = "mismatch"
    ERROR = "error"

    @property
    def exit_code(self) -> int:
        """Process exit code for this outcome."""
        return 0 if self in (CheckOutcome.SKIPPED, CheckOutcome.MATCH) else 1


def _say(console: Console, message: str) -> None:
    """Print a plain status line (paths may contain markup characters)."""
    console.print(message, markup=False, highlight=False)


def check_timeouts(
    source_path: str,
    repo_root: str,
    console: Console | None = None,
    source_label: str = DEFAULT_SOURCE_LABEL,
    docs_label: str = DEFAULT_DOCS_LABEL,
) -> CheckOutcome:
    """Check one source definition against its documentation page.

    Every failure prints a one-line diagnosis and stops before the
    comparison table, so a table is only ever printed for two fully
    parsed records.

    Args:
        source_path: Path to the ``*_resource.go`` or ``*_data_source.go`` file.
        repo_root: Root of the provider repository.
        console: Console to print to (defaults to stdout).
        source_label: Column header for the definition values.
        docs_label: Column header for the documentation values.

    Returns:
        The CheckOutcome of the run.
    """
    console = console or Console()
    _say(console, HEADER_MESSAGE)

    try:
        target = resolve_documentation_target(source_path, repo_root)
    except UnrecognizedFileKindError as exc:
        _say(console, str(exc))
        return CheckOutcome.SKIPPED
    logger.debug("expecting %s under %s", target.file_name, target.search_root)

    try:
        source_timeouts = get_parser(source_path).parse(source_path)
    except FileAccessError as exc:
        _say(console, f"Error reading Go file: {exc}")
        return CheckOutcome.ERROR

    try:
        docs_path = find_file(target.search_root, target.file_name)
    except (NotFoundError, TraversalError) as exc:
        _say(console, f"Error finding Markdown file: {exc}")
        return CheckOutcome.ERROR
    _say(console, f"Found matching documentation file {docs_path}")

    try:
        docs_timeouts = get_parser(docs_path).parse(docs_path)
    except FileAccessError as exc:
        _say(console, f"Error reading Markdown file: {exc}")
        return CheckOutcome.ERROR

    matches = render_comparison(
        source_timeouts,
        docs_timeouts,
        source_label=source_label,
        docs_label=docs_label,
        console=console,
    )
    print_verdict(matches, console)

    if not matches:
        logger.info(
            "mismatched timeouts for %s: %s",
            target.resource_name,
            ", ".join(source_timeouts.mismatched_fields(docs_timeouts)),
        )
        return CheckOutcome.MISMATCH
    return CheckOutcome.MATCH


def program_path(argv0: str) -> str:
    """Resolve the running program's path for the usage line.

    Falls back to ``argv0`` as given when it cannot be resolved.
    """
    try:
        return str(Path(argv0).resolve(strict=True))
    except (OSError, RuntimeError) as exc:
        logger.warning("unable to get executable path: %s", exc)
        return argv0


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr, keeping stdout for the report."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check that documented timeouts match a resource definition",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument('source_file', nargs='?',
                        help='Path to a *_resource.go or *_data_source.go file')
    parser.add_argument('repo_root', nargs='?',
                        help='Root directory of the provider repository')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging on stderr')
    parser.add_argument('--no-color', action='store_true',
                        help='Disable colored output')
    parser.add_argument('--source-label', default=DEFAULT_SOURCE_LABEL,
                        help=f'Column header for definition values (default: {DEFAULT_SOURCE_LABEL})')
    parser.add_argument('--docs-label', default=DEFAULT_DOCS_LABEL,
                        help=f'Column header for documentation values (default: {DEFAULT_DOCS_LABEL})')
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args, extras = parser.parse_known_args(argv)

    configure_logging(args.verbose)
    if extras:
        logger.debug("ignoring extra arguments: %s", " ".join(extras))

    # Too few arguments is informational, not an error
    if args.source_file is None or args.repo_root is None:
        print(f"Usage: {program_path(sys.argv[0])} <path_to_source_file> <repo_root>")
        return 0

    console = Console(no_color=args.no_color, soft_wrap=True)
    outcome = check_timeouts(
        args.source_file,
        args.repo_root,
        console=console,
        source_label=args.source_label,
        docs_label=args.docs_label,
    )
    logger.debug("outcome: %s", outcome.value)
    return outcome.exit_code


if __name__ == "__main__":
    sys.exit(main())
