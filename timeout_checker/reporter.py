"""
Side-by-side rendering of definition and documentation timeouts.

Rows whose durations disagree are highlighted so they stand out in CI logs.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from timeout_checker.config import (
    DEFAULT_DOCS_LABEL,
    DEFAULT_SOURCE_LABEL,
    MATCH_BANNER,
    MISMATCH_BANNER,
)
from timeout_checker.durations import format_duration
from timeout_checker.models import TimeoutRecord

MISMATCH_STYLE = "bold red"


def build_comparison_table(
    source: TimeoutRecord,
    docs: TimeoutRecord,
    source_label: str = DEFAULT_SOURCE_LABEL,
    docs_label: str = DEFAULT_DOCS_LABEL,
) -> Table:
    """Build a three-column table with one row per timeout field."""
    table = Table()
    table.add_column("")
    table.add_column(Text(source_label))
    table.add_column(Text(docs_label))

    for name, source_value in source.fields():
        docs_value = docs.get(name)
        style = MISMATCH_STYLE if source_value != docs_value else None
        table.add_row(
            name.capitalize(),
            format_duration(source_value),
            format_duration(docs_value),
            style=style,
        )

    return table


def render_comparison(
    source: TimeoutRecord,
    docs: TimeoutRecord,
    source_label: str = DEFAULT_SOURCE_LABEL,
    docs_label: str = DEFAULT_DOCS_LABEL,
    console: Console | None = None,
) -> bool:
    """Print the comparison table and report whether the records match.

    Args:
        source: Timeouts declared by the source definition.
        docs: Timeouts declared by the documentation page.
        source_label: Column header for the source values.
        docs_label: Column header for the documentation values.
        console: Console to print to (defaults to stdout).

    Returns:
        True when all four timeouts are equal.
    """
    console = console or Console()
    console.print(build_comparison_table(source, docs, source_label, docs_label))
    return source == docs


def print_verdict(matches: bool, console: Console | None = None) -> None:
    """Print the final match/mismatch banner."""
    console = console or Console()
    if matches:
        console.print(MATCH_BANNER, style="green", markup=False)
    else:
        console.print(MISMATCH_BANNER, style="red", markup=False)
