"""
Parser for resource documentation pages.

The "Timeouts" section of a page lists each timeout as a bullet::

    * `create` - (Defaults to 30 minutes) Used when creating the Widget.
"""

from __future__ import annotations

from timeout_checker.record_formats.base import TimeoutParser


class MarkdownParser(TimeoutParser):
    """Timeout parser for ``.html.markdown`` documentation pages."""

    @property
    def format_name(self) -> str:
        return "markdown"

    @property
    def supported_extensions(self) -> list[str]:
        return [".markdown", ".md"]

    @property
    def field_markers(self) -> dict[str, str]:
        return {
            "create": "`create`",
            "read": "`read`",
            "update": "`update`",
            "delete": "`delete`",
        }
