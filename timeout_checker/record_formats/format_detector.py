"""
Choosing a timeout parser for a file.

The checker hands both of its inputs, the Go definition and the markdown
page, to ``get_parser`` and lets the file extension decide which marker
set applies. Extensions come from each parser's ``supported_extensions``.
"""

from __future__ import annotations

from pathlib import Path

from timeout_checker.record_formats.base import TimeoutParser
from timeout_checker.record_formats.definition_parser import DefinitionParser
from timeout_checker.record_formats.markdown_parser import MarkdownParser

PARSER_CLASSES: tuple[type[TimeoutParser], ...] = (DefinitionParser, MarkdownParser)

# Format name for every extension a parser claims
EXTENSION_MAP: dict[str, str] = {
    extension: cls().format_name
    for cls in PARSER_CLASSES
    for extension in cls().supported_extensions
}

SUPPORTED_FORMATS = frozenset(EXTENSION_MAP.values())


def detect_format(filename: str) -> str:
    """Return the format name for a file, judged by its last suffix.

    ``widget.html.markdown`` is markdown and ``widget_resource.go`` is a
    definition.

    Raises:
        ValueError: If no parser claims the extension.
    """
    extension = Path(filename).suffix.lower()
    try:
        return EXTENSION_MAP[extension]
    except KeyError:
        raise ValueError(
            f"No timeout parser for '{filename}' "
            f"(known extensions: {', '.join(sorted(EXTENSION_MAP))})"
        ) from None


def get_parser_for_format(format_name: str) -> TimeoutParser:
    """Return a fresh parser for a format name.

    Raises:
        ValueError: If the format name is not supported.
    """
    for cls in PARSER_CLASSES:
        parser = cls()
        if parser.format_name == format_name:
            return parser
    raise ValueError(
        f"Unsupported format '{format_name}' "
        f"(known formats: {', '.join(sorted(SUPPORTED_FORMATS))})"
    )


def get_parser(filename: str) -> TimeoutParser:
    """Return the parser that understands ``filename``.

    Raises:
        ValueError: If no parser claims the extension.
    """
    return get_parser_for_format(detect_format(filename))
