"""
Mapping from a source definition file to its documentation page.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from timeout_checker.config import DOC_EXTENSION, DOCS_SUBDIRS, SUFFIX_KINDS
from timeout_checker.errors import UnrecognizedFileKindError


@dataclass(frozen=True)
class DocumentationTarget:
    """Where to look for a resource's documentation page."""

    kind: str
    resource_name: str
    search_root: str
    file_name: str


def source_kind(source_path: str) -> str | None:
    """Return 'resource', 'data_source' or None for a source filename."""
    base = Path(source_path).name
    for suffix, kind in SUFFIX_KINDS.items():
        if base.endswith(suffix):
            return kind
    return None


def is_recognized_source(source_path: str) -> bool:
    """Check whether a path names a resource or data source definition."""
    return source_kind(source_path) is not None


def extract_resource_name(source_path: str) -> str:
    """Strip the recognized suffix from the base name.

    >>> extract_resource_name("internal/service/widget_resource.go")
    'widget'
    >>> extract_resource_name("widget_data_source.go")
    'widget'
    """
    base = Path(source_path).name
    for suffix in SUFFIX_KINDS:
        if base.endswith(suffix):
            return base[: -len(suffix)]
    raise UnrecognizedFileKindError(source_path)


def resolve_documentation_target(source_path: str, repo_root: str) -> DocumentationTarget:
    """Work out the docs directory and page name for a source file.

    Args:
        source_path: Path to a ``*_resource.go`` or ``*_data_source.go`` file.
        repo_root: Root of the provider repository.

    Returns:
        The DocumentationTarget to search for.

    Raises:
        UnrecognizedFileKindError: If the file has neither suffix.
    """
    kind = source_kind(source_path)
    if kind is None:
        raise UnrecognizedFileKindError(source_path)

    resource_name = extract_resource_name(source_path)
    return DocumentationTarget(
        kind=kind,
        resource_name=resource_name,
        search_root=os.path.join(repo_root, *DOCS_SUBDIRS[kind].split("/")),
        file_name=f"{resource_name}{DOC_EXTENSION}",
    )
