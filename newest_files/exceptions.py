"""
Custom exception hierarchy for the newest-files scanner.

Traversal anomalies (unreadable directories, dangling links, entries that
cannot be stat'ed) are not errors here: the walker classifies and skips them.
"""


class NewestFilesError(Exception):
    """Base exception for all newest-files errors."""
    pass


class UsageError(NewestFilesError):
    """Raised when the command line does not name a root to scan."""
    pass


class MetadataExtractionError(NewestFilesError):
    """Raised when a FileRecord cannot be built from a visited entry."""
    pass
