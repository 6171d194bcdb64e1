"""
Parser for resource and data source definitions written in Go.

Timeouts are declared in the resource schema, one per line::

    Timeouts: &schema.ResourceTimeout{
        Create: schema.DefaultTimeout(30 * time.Minute),
        Delete: schema.DefaultTimeout(2 * time.Hour),
    },
"""

from __future__ import annotations

from timeout_checker.record_formats.base import TimeoutParser


class DefinitionParser(TimeoutParser):
    """Timeout parser for Go source definitions.

    Attributes:
        format_name: Returns 'definition'.
        supported_extensions: Returns ['.go'].
    """

    @property
    def format_name(self) -> str:
        """Return the format name."""
        return "definition"

    @property
    def supported_extensions(self) -> list[str]:
        """Return supported file extensions."""
        return [".go"]

    @property
    def field_markers(self) -> dict[str, str]:
        """Return the struct field labels of schema.ResourceTimeout."""
        return {
            "create": "Create:",
            "read": "Read:",
            "update": "Update:",
            "delete": "Delete:",
        }
