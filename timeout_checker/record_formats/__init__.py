"""
Record formats module for reading timeouts out of source and docs files.

Usage:
    from timeout_checker.record_formats import get_parser

    parser = get_parser("internal/widget_resource.go")
    record = parser.parse("internal/widget_resource.go")
    print(record.create)
"""

from timeout_checker.record_formats.base import TimeoutParser
from timeout_checker.record_formats.definition_parser import DefinitionParser
from timeout_checker.record_formats.format_detector import (
    EXTENSION_MAP,
    SUPPORTED_FORMATS,
    detect_format,
    get_parser,
    get_parser_for_format,
)
from timeout_checker.record_formats.markdown_parser import MarkdownParser

__all__ = [
    # Base class
    "TimeoutParser",
    # Format detection
    "detect_format",
    "get_parser",
    "get_parser_for_format",
    "EXTENSION_MAP",
    "SUPPORTED_FORMATS",
    # Parsers
    "DefinitionParser",
    "MarkdownParser",
]
