"""
Abstract base class for timeout record parsers.

This module defines the TimeoutParser interface that both the definition
(Go source) parser and the documentation (markdown) parser implement.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Iterator

from timeout_checker.durations import extract_duration
from timeout_checker.errors import FileAccessError
from timeout_checker.models import TIMEOUT_FIELDS, TimeoutRecord

logger = logging.getLogger(__name__)


class TimeoutParser(ABC):
    """Abstract base class for scanning a file into a TimeoutRecord.

    Subclasses only declare which token marks each field's line; the
    line scanning and duration extraction are shared.
    """

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the format name (e.g., 'definition', 'markdown')."""
        pass

    @property
    @abstractmethod
    def supported_extensions(self) -> list[str]:
        """Return supported file extensions (e.g., ['.go'])."""
        pass

    @property
    @abstractmethod
    def field_markers(self) -> dict[str, str]:
        """Return the marker substring for each timeout field."""
        pass

    def match_field(self, line: str) -> str | None:
        """Return the first field whose marker the line contains."""
        markers = self.field_markers
        for name in TIMEOUT_FIELDS:
            if markers[name] in line:
                return name
        return None

    def iter_matches(self, filename: str) -> Iterator[tuple[int, str, timedelta]]:
        """Lazily yield every marker hit in a file.

        Args:
            filename: Path to the file.

        Yields:
            Tuples of (line_number, field_name, duration). Line numbers
            start at 1. Bytes that are not valid UTF-8 are replaced, so
            a stray Latin-1 comment never hides the ASCII markers.

        Raises:
            FileAccessError: If the file cannot be opened or read.
        """
        try:
            with open(filename, "r", encoding="utf-8", errors="replace") as f:
                for line_number, line in enumerate(f, start=1):
                    name = self.match_field(line)
                    if name is not None:
                        yield line_number, name, extract_duration(line)
        except OSError as exc:
            raise FileAccessError(filename, str(exc)) from exc

    def parse(self, filename: str) -> TimeoutRecord:
        """Scan a whole file into a TimeoutRecord.

        A later line for the same field overwrites an earlier one.

        Raises:
            FileAccessError: If the file cannot be opened or read.
        """
        values: dict[str, timedelta] = {}
        for line_number, name, duration in self.iter_matches(filename):
            logger.debug(
                "%s:%d %s timeout %s", filename, line_number, name, duration
            )
            values[name] = duration
        return TimeoutRecord(**values)
