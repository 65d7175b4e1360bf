"""
Exceptions for begone.

ConfigError is the only error that aborts a run. WalkError subclasses
describe per-directory failures; the walker records them on events
instead of raising them.
"""

from pathlib import Path


class BegoneError(Exception):
    """Base exception for all begone errors."""

    pass


class ConfigError(BegoneError):
    """Raised when the run is misconfigured (bad root path, unknown ecosystem)."""

    pass


class WalkError(BegoneError):
    """
    A filesystem operation on a single directory failed.

    Attributes:
        path: Directory the operation was applied to
        cause: Underlying OSError
    """

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {self.reason}")

    @property
    def reason(self) -> str:
        """OS error message, naming the offending file when it is not the path itself."""
        text = self.cause.strerror or str(self.cause)
        filename = self.cause.filename
        if filename is not None and Path(filename) != self.path:
            return f"{text}: {filename}"
        return text


class ListingError(WalkError):
    """Raised when a directory's entries cannot be enumerated."""

    pass


class DeletionError(WalkError):
    """Raised when a matched directory cannot be fully removed."""

    pass
