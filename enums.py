"""
Enumeration types for begone.

Provides type-safe constants for ecosystem selection and walk actions.
"""

from enum import Enum

from exceptions import ConfigError


class EcosystemKind(str, Enum):
    """
    Supported project ecosystems.

    Each kind maps to a fixed set of disposable directory names in the
    rule table. ALL selects the union of every other kind.
    """
    RUST = "rust"
    PYTHON = "python"
    JAVASCRIPT = "js"
    JAVA = "java"
    GO = "go"
    DOTNET = "dotnet"
    ALL = "all"

    def __str__(self) -> str:
        """Return the value for string operations."""
        return self.value

    @classmethod
    def parse(cls, text: str) -> "EcosystemKind":
        """
        Convert user-supplied text to an EcosystemKind.

        The CLI subcommands only accept exact lowercase names, so the
        whitespace trimming and case folding here serve library callers.

        Args:
            text: Ecosystem name, case-insensitive, surrounding whitespace ignored

        Returns:
            Matching EcosystemKind

        Raises:
            ConfigError: If text names no known ecosystem
        """
        try:
            return cls(text.strip().lower())
        except ValueError:
            choices = ", ".join(kind.value for kind in cls)
            raise ConfigError(
                f"Unknown ecosystem '{text}' (expected one of: {choices})"
            ) from None


class Action(str, Enum):
    """
    Outcome recorded for a directory during a walk.

    VISITED is informational and only produced in verbose mode.
    """
    DELETED = "deleted"
    WOULD_DELETE = "would_delete"
    FAILED = "failed"
    VISITED = "visited"

    def __str__(self) -> str:
        """Return the value for string operations."""
        return self.value
