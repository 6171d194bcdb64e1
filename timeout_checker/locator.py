"""
Locating a documentation page by name under a directory tree.
"""

from __future__ import annotations

import logging
import os

from timeout_checker.errors import NotFoundError, TraversalError

logger = logging.getLogger(__name__)


def _search(directory: str, file_name: str) -> str | None:
    """Depth-first search of one directory, stopping at the first match."""
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        raise TraversalError(directory, exc.strerror or str(exc)) from exc

    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as exc:
            raise TraversalError(entry.path, exc.strerror or str(exc)) from exc

        if not is_dir:
            if entry.name == file_name:
                return entry.path
        else:
            found = _search(entry.path, file_name)
            if found is not None:
                return found

    return None


def find_file(root: str, file_name: str) -> str:
    """Find the first file named ``file_name`` under ``root``.

    Directories are visited depth-first in lexical order and symlinked
    directories are not followed.

    Args:
        root: Directory to search.
        file_name: Exact base name to look for.

    Returns:
        Path of the first match, joined onto ``root``.

    Raises:
        NotFoundError: If no such file exists under ``root``.
        TraversalError: If ``root`` or a subdirectory cannot be listed.
    """
    logger.debug("searching %s for %s", root, file_name)
    found = _search(root, file_name)
    if found is None:
        raise NotFoundError(file_name, root)
    return found
