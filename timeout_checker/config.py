"""
Repository conventions for the timeout documentation checker.

Source definitions live anywhere in the provider tree and are named
``<resource>_resource.go`` or ``<resource>_data_source.go``; their
documentation pages live under ``website/docs/r`` or ``website/docs/d``
and are named ``<resource>.html.markdown``.
"""

from __future__ import annotations

# Recognized source filename suffixes
RESOURCE_SUFFIX = "_resource.go"
DATA_SOURCE_SUFFIX = "_data_source.go"

# Mapping of source suffixes to resource kinds
SUFFIX_KINDS: dict[str, str] = {
    DATA_SOURCE_SUFFIX: "data_source",
    RESOURCE_SUFFIX: "resource",
}

# Documentation subdirectory (relative to the repository root) per kind
DOCS_SUBDIRS: dict[str, str] = {
    "resource": "website/docs/r",
    "data_source": "website/docs/d",
}

DOC_EXTENSION = ".html.markdown"

DEFAULT_SOURCE_LABEL = "Def"
DEFAULT_DOCS_LABEL = "Docs"

HEADER_MESSAGE = "Checking Timeouts for Resource/ Data Source Documentation"
MATCH_BANNER = "* Documentation Matches! *"
MISMATCH_BANNER = "* Documentation Does Not Match! *"
