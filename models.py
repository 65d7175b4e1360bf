"""
Data structure definitions.

Type-safe data models for walk configuration, walk events and run summaries.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from cleaning.rules import RuleSet, rules_for
from enums import Action, EcosystemKind
from exceptions import WalkError


@dataclass(frozen=True)
class WalkConfig:
    """
    Settings for a single walk. Created once per invocation, never mutated.

    Attributes:
        root: Directory the walk starts from
        ruleset: Directory names to delete
        dry_run: If True, report matches without touching the filesystem
        verbose: If True, the walker also reports visited directories
        require_marker: If True, a match also needs a project marker file
                        next to it (e.g. Cargo.toml beside target/)
    """

    root: Path
    ruleset: RuleSet
    dry_run: bool = False
    verbose: bool = False
    require_marker: bool = False

    @classmethod
    def create(
        cls,
        kind: EcosystemKind,
        root: Optional[Path] = None,
        dry_run: bool = False,
        verbose: bool = False,
        require_marker: bool = False
    ) -> "WalkConfig":
        """
        Create a WalkConfig for an ecosystem.

        Args:
            kind: Ecosystem selection
            root: Start directory (default: current working directory)
            dry_run: Report only, never delete
            verbose: Report visited directories too
            require_marker: Only match next to project marker files

        Returns:
            WalkConfig with the ecosystem's RuleSet
        """
        return cls(
            root=Path(root) if root is not None else Path.cwd(),
            ruleset=rules_for(kind),
            dry_run=dry_run,
            verbose=verbose,
            require_marker=require_marker
        )

    @property
    def kind(self) -> EcosystemKind:
        return self.ruleset.kind


@dataclass(frozen=True)
class MatchEvent:
    """
    One walk outcome for one directory.

    Attributes:
        path: Directory the event is about
        action: What happened to it
        error: Failure details, set only when action is FAILED
    """

    path: Path
    action: Action
    error: Optional[WalkError] = None

    @classmethod
    def failed(cls, error: WalkError) -> "MatchEvent":
        """Create a FAILED event for a walk error."""
        return cls(path=error.path, action=Action.FAILED, error=error)

    @property
    def reason(self) -> Optional[str]:
        """Failure reason text, or None for successful actions."""
        return self.error.reason if self.error else None

    @property
    def is_match(self) -> bool:
        """True for events about a matched directory (deleted or would delete)."""
        return self.action in (Action.DELETED, Action.WOULD_DELETE)


@dataclass
class RunSummary:
    """
    Collected outcome of a cleanup run.

    Attributes:
        kind: Ecosystem that was cleaned
        root: Walk root
        dry_run: Whether deletions were simulated
        events: Every event in walk order
    """

    kind: EcosystemKind
    root: Path
    dry_run: bool
    events: list[MatchEvent] = field(default_factory=list)

    def count(self, action: Action) -> int:
        return sum(1 for event in self.events if event.action is action)

    @property
    def deleted(self) -> int:
        return self.count(Action.DELETED)

    @property
    def would_delete(self) -> int:
        return self.count(Action.WOULD_DELETE)

    @property
    def failed(self) -> int:
        return self.count(Action.FAILED)

    @property
    def visited(self) -> int:
        return self.count(Action.VISITED)

    @property
    def matched(self) -> int:
        """Directories removed, or that would be removed in a dry run."""
        return self.deleted + self.would_delete
