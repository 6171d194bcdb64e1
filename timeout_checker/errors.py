"""Exceptions raised while checking timeout documentation."""

from __future__ import annotations


class TimeoutCheckError(Exception):
    """Base class for all checker errors."""


class FileAccessError(TimeoutCheckError):
    """A source or documentation file could not be opened or read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"unable to read {path}: {reason}")


class NotFoundError(TimeoutCheckError):
    """No file with the expected name exists under the search root."""

    def __init__(self, file_name: str, root: str):
        self.file_name = file_name
        self.root = root
        super().__init__(f"file {file_name} not found")


class TraversalError(TimeoutCheckError):
    """The directory tree could not be walked."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"unable to walk {path}: {reason}")


class UnrecognizedFileKindError(TimeoutCheckError):
    """The source file is neither a resource nor a data source definition."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"'{path}' is probably not a resource or data source definition."
        )
