"""
Timeout record model shared by both file formats.

A record holds the four configurable timeouts of a resource. A zero
duration means the timeout was not declared.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Iterator

# Canonical field order, used for marker dispatch and table rows
TIMEOUT_FIELDS: tuple[str, ...] = ("create", "read", "update", "delete")


@dataclass(frozen=True)
class TimeoutRecord:
    """Create/Read/Update/Delete timeouts declared by one file."""

    create: timedelta = field(default_factory=timedelta)
    read: timedelta = field(default_factory=timedelta)
    update: timedelta = field(default_factory=timedelta)
    delete: timedelta = field(default_factory=timedelta)

    def get(self, name: str) -> timedelta:
        """Return the duration for a field name."""
        if name not in TIMEOUT_FIELDS:
            raise KeyError(f"Unknown timeout field '{name}'")
        return getattr(self, name)

    def fields(self) -> Iterator[tuple[str, timedelta]]:
        """Iterate (name, duration) pairs in canonical order."""
        for name in TIMEOUT_FIELDS:
            yield name, getattr(self, name)

    def mismatched_fields(self, other: TimeoutRecord) -> list[str]:
        """List the field names whose durations differ from ``other``."""
        return [name for name in TIMEOUT_FIELDS if self.get(name) != other.get(name)]
